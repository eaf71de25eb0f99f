"""Tests for graffiti filtering and proposer aggregation."""

import re

from src.analysis.graffiti import matches_graffiti, select_proposer_indexes
from src.data.blocks.models import BlockRecord


def record(slot: int, proposer_index: int, graffiti: str) -> BlockRecord:
    return BlockRecord(slot=slot, proposer_index=proposer_index, graffiti=graffiti)


class TestMatchesGraffiti:
    """Tests for matches_graffiti."""

    def test_case_insensitive_substring(self) -> None:
        """Test a string pattern ignores case and matches anywhere."""
        assert matches_graffiti(record(1, 1, "Powered by DAppNode"), "dappnode")

    def test_no_match(self) -> None:
        """Test unrelated graffiti is rejected."""
        assert not matches_graffiti(record(1, 1, "Lighthouse/v1.0"), "dappnode")

    def test_compiled_pattern_used_as_is(self) -> None:
        """Test a precompiled pattern keeps its own flags."""
        assert not matches_graffiti(record(1, 1, "DAPPNODE"), re.compile("dappnode"))


class TestSelectProposerIndexes:
    """Tests for select_proposer_indexes."""

    def test_slot_window_is_inclusive(self) -> None:
        """Test only slots inside [from, to] are candidates."""
        records = [
            record(100, 1, "dappnode"),
            record(200, 2, "dappnode"),
            record(300, 3, "dappnode"),
        ]

        assert select_proposer_indexes(records, 150, 300, "dappnode") == [2, 3]

    def test_duplicates_counted_once(self) -> None:
        """Test a proposer with several matching blocks appears once."""
        records = [record(1, 9, "dappnode"), record(2, 9, "DAPPNODE")]

        assert select_proposer_indexes(records, 1, 2, "dappnode") == [9]

    def test_first_seen_order(self) -> None:
        """Test output follows record order rather than sorted order."""
        records = [
            record(1, 30, "dappnode"),
            record(2, 10, "dappnode"),
            record(3, 30, "dappnode"),
            record(4, 20, "dappnode"),
        ]

        assert select_proposer_indexes(records, 1, 4, "dappnode") == [30, 10, 20]

    def test_graffiti_filter(self) -> None:
        """Test slots 1-3 with mixed graffiti keep only matching proposers."""
        records = [
            record(1, 5, "dappnode-x"),
            record(2, 6, "other"),
            record(3, 5, "dappnode-y"),
        ]

        assert select_proposer_indexes(records, 1, 3, re.compile("dappnode", re.I)) == [5]

    def test_regex_pattern(self) -> None:
        """Test the pattern is a regular expression, not a literal."""
        records = [record(1, 1, "teku/v21"), record(2, 2, "prysm/v1"), record(3, 3, "nimbus")]

        assert select_proposer_indexes(records, 1, 3, r"^(teku|prysm)/") == [1, 2]

    def test_no_records(self) -> None:
        """Test an empty log yields nothing."""
        assert select_proposer_indexes([], 1, 10, "dappnode") == []
