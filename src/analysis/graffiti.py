"""Select proposers whose block graffiti matches a pattern."""

import re

from collections.abc import Iterable

from src.data.blocks.models import BlockRecord


def matches_graffiti(record: BlockRecord, pattern: re.Pattern[str] | str) -> bool:
    """Case-insensitive search of ``pattern`` in the record's graffiti."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE)
    return pattern.search(record.graffiti) is not None


def select_proposer_indexes(
    records: Iterable[BlockRecord],
    from_slot: int,
    to_slot: int,
    pattern: re.Pattern[str] | str,
) -> list[int]:
    """Unique proposer indexes of matching blocks in ``[from_slot, to_slot]``.

    The window is applied independently of what was scanned, so a narrower
    window only needs the existing record log.

    Args:
        records: Block records, usually ``RecordStore.read_all()``
        from_slot: First slot of the window (inclusive)
        to_slot: Last slot of the window (inclusive)
        pattern: Regular expression; a string is compiled case-insensitively

    Returns:
        Proposer indexes in first-seen order, without duplicates

    Example:
        >>> records = [
        ...     BlockRecord(slot=1, proposer_index=5, graffiti="dappnode-x"),
        ...     BlockRecord(slot=2, proposer_index=6, graffiti="other"),
        ...     BlockRecord(slot=3, proposer_index=5, graffiti="DAppNode-y"),
        ... ]
        >>> select_proposer_indexes(records, 1, 3, "dappnode")
        [5]
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE)

    proposer_indexes: dict[int, None] = {}
    for record in records:
        if from_slot <= record.slot <= to_slot and matches_graffiti(record, pattern):
            proposer_indexes.setdefault(record.proposer_index)
    return list(proposer_indexes)


__all__ = ["matches_graffiti", "select_proposer_indexes"]
