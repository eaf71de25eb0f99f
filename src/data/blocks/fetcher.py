"""Fetch blocks for a slot from a Prysm beacon node."""

import httpx

from src.data.blocks.models import BeaconBlocksResponse, BlockRecord
from src.helpers.http import get_json
from src.helpers.parsers import parse_graffiti


class BeaconBlockFetcher:
    """Client for ``/eth/v1alpha1/beacon/blocks``."""

    def __init__(self, client: httpx.AsyncClient, beacon_node_url: str) -> None:
        self.client = client
        self.beacon_node_url = beacon_node_url.rstrip("/")

    def blocks_url(self, slot: int) -> str:
        """URL listing every block proposed at ``slot``."""
        return f"{self.beacon_node_url}/eth/v1alpha1/beacon/blocks?slot={slot}"

    async def fetch_blocks(self, slot: int) -> list[BlockRecord]:
        """Fetch all blocks at ``slot`` with their decoded graffiti.

        A slot can hold no block (missed proposal) or several (forks).

        Raises:
            httpx.HTTPError: On transport errors or a non-2xx response
            ValueError: If the body is not JSON, does not have the expected
                shape, or carries undecodable base64 graffiti
        """
        data = await get_json(self.client, self.blocks_url(slot))
        response = BeaconBlocksResponse.model_validate(data)
        return [
            BlockRecord(
                slot=container.block.block.slot,
                proposer_index=container.block.block.proposer_index,
                graffiti=parse_graffiti(container.block.block.body.graffiti),
            )
            for container in response.block_containers
        ]


__all__ = ["BeaconBlockFetcher"]
