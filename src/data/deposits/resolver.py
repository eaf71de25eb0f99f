"""Resolve validator indexes to the addresses that funded their deposits."""

import httpx

from src.data.deposits.models import DepositsResponse
from src.helpers.constants import DEPOSITS_BATCH_SIZE
from src.helpers.http import get_json
from src.helpers.logging import get_logger
from src.helpers.parsers import chunked, gwei_to_eth


logger = get_logger(__name__)


class ExplorerAPIError(RuntimeError):
    """beaconcha.in answered 2xx but reported a failure in its payload."""


class DepositResolver:
    """Batch lookups against the beaconcha.in deposits endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        beaconchain_url: str,
        api_key: str | None = None,
        batch_size: int = DEPOSITS_BATCH_SIZE,
    ) -> None:
        self.client = client
        self.beaconchain_url = beaconchain_url.rstrip("/")
        self.headers = {"apikey": api_key} if api_key else None
        self.batch_size = batch_size

    def deposits_url(self, validator_indexes: list[int]) -> str:
        """URL for one batch of comma-separated indexes."""
        indexes = ",".join(str(index) for index in validator_indexes)
        return f"{self.beaconchain_url}/api/v1/validator/{indexes}/deposits"

    async def fetch_batch(self, validator_indexes: list[int]) -> list[str]:
        """Funding addresses of the valid deposits of one batch.

        Raises:
            httpx.HTTPError: On transport errors or a non-2xx response
            ExplorerAPIError: If the response status is not OK
            ValueError: If the body is not JSON or has an unexpected shape
        """
        url = self.deposits_url(validator_indexes)
        data = await get_json(self.client, url, headers=self.headers)
        response = DepositsResponse.model_validate(data)
        if response.status != "OK":
            msg = f"beaconcha.in returned status {response.status!r} for {url}"
            raise ExplorerAPIError(msg)

        addresses: list[str] = []
        for deposit in response.data:
            if not deposit.is_valid:
                logger.warning(
                    "Bad deposit for pubkey: %s (amount %s ETH, removed=%s, "
                    "valid_signature=%s)",
                    deposit.publickey,
                    gwei_to_eth(deposit.amount),
                    deposit.removed,
                    deposit.valid_signature,
                )
                continue
            addresses.append(deposit.from_address)
        return addresses

    async def fetch_deposit_addresses(self, validator_indexes: list[int]) -> list[str]:
        """Funding addresses of every valid deposit, in batch order.

        Duplicates are kept; use ``unique_addresses`` to collapse them. The
        lookup is all-or-nothing: the first failing batch aborts the call.
        """
        batches = chunked(validator_indexes, self.batch_size)
        addresses: list[str] = []
        for batch_num, batch in enumerate(batches, start=1):
            logger.debug(
                "Fetching deposits batch %d/%d (%d validators)",
                batch_num,
                len(batches),
                len(batch),
            )
            addresses.extend(await self.fetch_batch(batch))
        return addresses


def unique_addresses(addresses: list[str]) -> list[str]:
    """Drop repeated addresses, keeping first-seen order."""
    return list(dict.fromkeys(addresses))


__all__ = ["DepositResolver", "ExplorerAPIError", "unique_addresses"]
