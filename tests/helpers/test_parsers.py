"""Tests for parsing helpers."""

import base64

import pytest

from src.helpers.parsers import chunked, gwei_to_eth, parse_graffiti


def encode_graffiti(text: str, size: int = 32) -> str:
    """Base64 of ``text`` NUL-padded to ``size`` bytes."""
    return base64.b64encode(text.encode().ljust(size, b"\x00")).decode()


class TestParseGraffiti:
    """Tests for parse_graffiti."""

    def test_strips_nul_padding(self) -> None:
        """Test the documented example decodes to plain text."""
        assert parse_graffiti("dGVzdAAAAAA=") == "test"

    def test_full_32_byte_field(self) -> None:
        """Test a realistic 32-byte graffiti."""
        assert parse_graffiti(encode_graffiti("BTCS Zug validator")) == "BTCS Zug validator"

    def test_empty_graffiti(self) -> None:
        """Test an all-zero field decodes to an empty string."""
        assert parse_graffiti(encode_graffiti("")) == ""

    def test_no_padding(self) -> None:
        """Test a field without any zero byte is kept whole."""
        text = "x" * 32
        assert parse_graffiti(encode_graffiti(text)) == text

    def test_truncates_at_first_zero(self) -> None:
        """Test bytes after the first zero are dropped even if non-zero."""
        raw = b"abc\x00def" + b"\x00" * 25
        assert parse_graffiti(base64.b64encode(raw).decode()) == "abc"

    def test_keeps_commas_and_unicode(self) -> None:
        """Test separators and multi-byte characters survive."""
        assert parse_graffiti(encode_graffiti("dappnode, ✓")) == "dappnode, ✓"

    def test_invalid_utf8_is_replaced(self) -> None:
        """Test undecodable bytes do not raise."""
        raw = b"ok\xff" + b"\x00" * 29
        assert parse_graffiti(base64.b64encode(raw).decode()) == "ok\ufffd"

    def test_invalid_base64_raises(self) -> None:
        """Test broken base64 raises ValueError."""
        with pytest.raises(ValueError):
            parse_graffiti("abc")


class TestChunked:
    """Tests for chunked."""

    def test_batches_of_100(self) -> None:
        """Test 250 items split into 100, 100, 50."""
        assert [len(c) for c in chunked(list(range(250)), 100)] == [100, 100, 50]

    def test_preserves_order(self) -> None:
        """Test concatenating chunks gives back the input."""
        items = list(range(7))
        assert [i for c in chunked(items, 3) for i in c] == items

    def test_empty(self) -> None:
        """Test an empty list gives no chunks."""
        assert chunked([], 100) == []

    def test_rejects_non_positive_size(self) -> None:
        """Test size 0 raises ValueError."""
        with pytest.raises(ValueError, match="must be positive"):
            chunked([1], 0)


def test_gwei_to_eth() -> None:
    """Test gwei conversion."""
    assert gwei_to_eth(32_000_000_000) == 32.0
    assert gwei_to_eth(None) is None
