"""Find the deposit addresses of validators that sign blocks with a graffiti.

Processing flow:
1. Scan beacon node slots into the block record log (resumable, SIGINT-safe)
2. Filter the log by slot window and graffiti pattern -> validatorIndexes.txt
3. Look up the validators' deposits on beaconcha.in -> addresses.txt

Configuration defaults live in src/helpers/constants.py and can be overridden
through the environment or a .env file (see src/helpers/config.py).

Usage:
    python -m src.pipeline
"""

from pathlib import Path
import sys

from collections.abc import Iterable

import asyncio

from pydantic import BaseModel
from rich.console import Console

from src.analysis.graffiti import select_proposer_indexes
from src.data.blocks.backfill import ScanResult, SlotScanner
from src.data.blocks.fetcher import BeaconBlockFetcher
from src.data.blocks.store import RecordStore
from src.data.deposits.resolver import DepositResolver, unique_addresses
from src.helpers.config import ScanConfig, load_scan_config
from src.helpers.http import create_http_client
from src.helpers.logging import get_logger
from src.helpers.signals import StopToken, stop_on_sigint


logger = get_logger(__name__)


class PipelineResult(BaseModel):
    """What a full run produced."""

    scan: ScanResult
    validator_indexes: list[int]
    addresses: list[str]
    total_addresses: int


def write_lines(path: str | Path, values: Iterable[object]) -> None:
    """Overwrite ``path`` with one value per line (no trailing newline)."""
    Path(path).write_text("\n".join(str(value) for value in values), encoding="utf-8")


async def run_pipeline(
    config: ScanConfig,
    token: StopToken | None = None,
    console: Console | None = None,
    *,
    install_signal_handler: bool = False,
) -> PipelineResult:
    """Scan, filter and resolve as configured.

    Args:
        config: Scan window, pattern, paths and endpoints
        token: Stop token polled by the scan loop
        console: Rich console for banner and summary output
        install_signal_handler: Route SIGINT to ``token`` while scanning

    Returns:
        PipelineResult with the matched indexes and unique addresses

    Raises:
        httpx.HTTPError, ValueError, ExplorerAPIError: Any failure is fatal
    """
    token = token or StopToken()
    console = console or Console()

    console.print("[bold blue]Graffiti deposit scan[/bold blue]")
    console.print(f"Slot window: {config.from_slot:,} to {config.to_slot:,}")
    console.print(f"Graffiti pattern: /{config.graffiti_pattern}/i")

    async with create_http_client() as client:
        with RecordStore(config.record_file) as store:
            scanner = SlotScanner(
                fetcher=BeaconBlockFetcher(client, config.beacon_node_url),
                store=store,
                from_slot=config.from_slot,
                to_slot=config.to_slot,
                console=console,
            )
            if install_signal_handler:
                with stop_on_sigint(token):
                    scan = await scanner.run(token)
            else:
                scan = await scanner.run(token)
            records = store.read_all()

        validator_indexes = select_proposer_indexes(
            records,
            config.from_slot,
            config.to_slot,
            config.graffiti_regex,
        )
        logger.info("Proposer indexes: %d", len(validator_indexes))
        write_lines(config.indexes_output, validator_indexes)

        resolver = DepositResolver(
            client, config.beaconchain_url, api_key=config.beaconchain_api_key
        )
        addresses = await resolver.fetch_deposit_addresses(validator_indexes)

    addresses_unique = unique_addresses(addresses)
    logger.info(
        "Eth1 addresses: %d (total %d)", len(addresses_unique), len(addresses)
    )
    write_lines(config.addresses_output, addresses_unique)

    console.print(
        f"\n[bold green]✓ Done[/bold green] - {len(validator_indexes):,} validators "
        f"-> {config.indexes_output}, {len(addresses_unique):,} addresses "
        f"-> {config.addresses_output}"
    )
    return PipelineResult(
        scan=scan,
        validator_indexes=validator_indexes,
        addresses=addresses_unique,
        total_addresses=len(addresses),
    )


async def main() -> None:
    """Main entry point."""
    try:
        config = load_scan_config()
        await run_pipeline(config, install_signal_handler=True)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


def cli() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
