"""Append-only CSV log of scanned blocks.

The log is the only persisted state. Each scan appends one row per block and
the last row doubles as the resume checkpoint. Rows are written by hand rather
than through ``csv`` so that graffiti containing commas stays unquoted: on read
everything after the second separator is the graffiti.
"""

from pathlib import Path
from types import TracebackType

from typing import Self, TextIO

from src.data.blocks.models import BlockRecord
from src.helpers.logging import get_logger


logger = get_logger(__name__)

SEPARATOR = ","
HEADER = SEPARATOR.join(["slot", "proposerIndex", "graffiti"])


class RecordStore:
    """CSV block log with lazy append handle."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._stream: TextIO | None = None
        self.open()

    def open(self) -> None:
        """Create the file with its header if it does not exist yet.

        An existing file whose last row lacks a line break (a hand edit or a
        write cut short) is terminated first so the next append starts a row.
        """
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(HEADER + "\n", encoding="utf-8")
            logger.info("Created block record %s", self.path)
            return

        if self.path.stat().st_size == 0:
            return
        with self.path.open("rb") as f:
            f.seek(-1, 2)
            last_byte = f.read(1)
        if last_byte != b"\n":
            with self.path.open("a", encoding="utf-8") as f:
                f.write("\n")
            logger.warning("Terminated unfinished last row of %s", self.path)

    def append_entry(self, record: BlockRecord) -> None:
        """Append one record and flush it to disk."""
        # A line break inside graffiti would split the row
        graffiti = record.graffiti.replace("\r", " ").replace("\n", " ")
        row = SEPARATOR.join([str(record.slot), str(record.proposer_index), graffiti])

        if self._stream is None:
            self._stream = self.path.open("a", encoding="utf-8")
        self._stream.write(row + "\n")
        self._stream.flush()

    def _read_lines(self) -> list[str]:
        # Split on "\n" only: graffiti may hold other line-like characters
        return self.path.read_text(encoding="utf-8").split("\n")

    def last_slot(self) -> int | None:
        """Slot of the last non-empty row, or None if nothing was recorded."""
        rows = [line for line in self._read_lines() if line.strip()]
        if not rows or rows[-1].strip() == HEADER:
            return None
        return int(rows[-1].split(SEPARATOR, 1)[0])

    def read_all(self) -> list[BlockRecord]:
        """Parse every row of the log.

        Raises:
            ValueError: If a row has a non-numeric slot or proposer index
        """
        records: list[BlockRecord] = []
        for line_number, line in enumerate(self._read_lines(), start=1):
            if not line.strip() or line.strip() == HEADER:
                continue
            try:
                slot, proposer_index, *graffiti = line.split(SEPARATOR)
                records.append(
                    BlockRecord(
                        slot=int(slot),
                        proposer_index=int(proposer_index),
                        graffiti=SEPARATOR.join(graffiti),
                    )
                )
            except ValueError as e:
                msg = f"Malformed row {line_number} in {self.path}: {line!r}"
                raise ValueError(msg) from e
        return records

    def close(self) -> None:
        """Close the append handle, if one was opened."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["HEADER", "SEPARATOR", "RecordStore"]
