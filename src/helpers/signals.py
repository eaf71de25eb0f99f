"""Cooperative shutdown on SIGINT."""

from collections.abc import Iterator
from contextlib import contextmanager
import signal

import asyncio

from src.helpers.logging import get_logger


logger = get_logger(__name__)


class StopToken:
    """Stop request shared between a signal handler and a polling loop.

    Setting the token never interrupts work in progress; loops check
    ``stopped`` at their own iteration boundary.
    """

    def __init__(self) -> None:
        self._stopped = False

    @property
    def stopped(self) -> bool:
        """Whether a stop was requested."""
        return self._stopped

    def stop(self) -> None:
        """Request a stop."""
        if not self._stopped:
            logger.info("Shutdown signal received, finishing current slot...")
        self._stopped = True


@contextmanager
def stop_on_sigint(
    token: StopToken, loop: asyncio.AbstractEventLoop | None = None
) -> Iterator[StopToken]:
    """Route SIGINT to ``token.stop`` for the duration of the block.

    Args:
        token: Token to set when SIGINT arrives
        loop: Event loop to register on (default: the running loop)

    Yields:
        The same token

    Example:
        ```python
        token = StopToken()
        with stop_on_sigint(token):
            await scanner.run(token)
        ```
    """
    loop = loop or asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, token.stop)
    try:
        yield token
    finally:
        loop.remove_signal_handler(signal.SIGINT)


__all__ = ["StopToken", "stop_on_sigint"]
