"""Parsing utilities for common data transformations."""

import base64
from typing import TypeVar

T = TypeVar("T")


def parse_graffiti(graffiti_b64: str) -> str:
    """Decode a base64 graffiti field into display text.

    The field is a fixed 32-byte buffer padded with NUL bytes. Everything from
    the first zero byte on is dropped and the rest is decoded as UTF-8, with
    undecodable bytes replaced.

    Args:
        graffiti_b64: Base64-encoded graffiti bytes

    Returns:
        str: Graffiti text

    Example:
        >>> parse_graffiti("dGVzdAAAAAA=")
        'test'
    """
    raw = base64.b64decode(graffiti_b64)
    end = raw.find(b"\x00")
    if end != -1:
        raw = raw[:end]
    return raw.decode("utf-8", errors="replace")


def gwei_to_eth(gwei: int | None) -> float | None:
    """Convert Gwei to ETH (divide by 1e9).

    Args:
        gwei: Amount in Gwei, or None

    Returns:
        float | None: Amount in ETH, or None if input was None

    Example:
        >>> gwei_to_eth(32000000000)
        32.0
    """
    return float(gwei) / 1e9 if gwei is not None else None


def chunked(items: list[T], size: int) -> list[list[T]]:
    """Split a list into consecutive slices of at most ``size`` items.

    Example:
        >>> [len(c) for c in chunked(list(range(250)), 100)]
        [100, 100, 50]
    """
    if size <= 0:
        msg = f"Chunk size must be positive, got {size}"
        raise ValueError(msg)
    return [items[i : i + size] for i in range(0, len(items), size)]
