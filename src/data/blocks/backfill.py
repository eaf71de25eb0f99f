"""Resumable slot scan from the beacon node into the block record log."""

from pydantic import BaseModel
from rich.console import Console

from src.data.blocks.fetcher import BeaconBlockFetcher
from src.data.blocks.store import RecordStore
from src.helpers.backfill import BackfillBase
from src.helpers.logging import get_logger
from src.helpers.signals import StopToken


logger = get_logger(__name__)


class ScanResult(BaseModel):
    """Summary of one scan run."""

    start_slot: int
    last_scanned_slot: int | None = None
    slots_scanned: int = 0
    blocks_appended: int = 0
    stopped: bool = False


def resume_slot(last_slot: int | None, from_slot: int) -> int:
    """First slot to scan given the persisted checkpoint.

    Example:
        >>> resume_slot(None, 100)
        100
        >>> resume_slot(150, 100)
        151
        >>> resume_slot(20, 100)
        100
    """
    if last_slot is None:
        return from_slot
    return max(last_slot + 1, from_slot)


class SlotScanner(BackfillBase):
    """Walk ``[from_slot, to_slot]`` ascending and log every proposed block.

    Each record is appended as soon as its slot is fetched, so an interrupted
    or crashed run loses at most the slot in flight and the next run resumes
    after the last persisted slot.
    """

    def __init__(
        self,
        fetcher: BeaconBlockFetcher,
        store: RecordStore,
        from_slot: int,
        to_slot: int,
        console: Console | None = None,
    ) -> None:
        super().__init__(console=console)
        self.fetcher = fetcher
        self.store = store
        self.from_slot = from_slot
        self.to_slot = to_slot

    async def run(self, token: StopToken | None = None) -> ScanResult:
        """Scan from the resume point to ``to_slot``.

        Args:
            token: Polled before each slot; once stopped, no new slot starts

        Returns:
            ScanResult describing what was scanned

        Raises:
            httpx.HTTPError, ValueError: From the fetcher; the run is aborted
        """
        token = token or StopToken()
        start_slot = resume_slot(self.store.last_slot(), self.from_slot)
        result = ScanResult(start_slot=start_slot)

        if start_slot > self.to_slot:
            self.console.print(
                f"[yellow]Block record already covers slot {self.to_slot:,}, "
                "nothing to scan[/yellow]"
            )
            return result

        self.console.print(
            f"[cyan]Scanning slots {start_slot:,} to {self.to_slot:,} "
            f"({self.to_slot - start_slot + 1:,} slots)[/cyan]"
        )

        for slot in range(start_slot, self.to_slot + 1):
            if token.stopped:
                result.stopped = True
                break

            blocks = await self.fetcher.fetch_blocks(slot)
            for block in blocks:
                self.store.append_entry(block)
                result.blocks_appended += 1
                logger.info("slot %s proposer %s", block.slot, block.proposer_index)

            result.last_scanned_slot = slot
            result.slots_scanned += 1

        if result.stopped:
            self.console.print(
                f"[yellow]Scan stopped after slot {result.last_scanned_slot}, "
                "rerun to resume[/yellow]"
            )
        else:
            self.console.print(
                f"[green]Scan complete: {result.slots_scanned:,} slots, "
                f"{result.blocks_appended:,} blocks[/green]"
            )
        return result


__all__ = ["ScanResult", "SlotScanner", "resume_slot"]
