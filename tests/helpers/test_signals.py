"""Tests for the SIGINT stop token."""

import os
import signal

import asyncio
import pytest

from src.helpers.signals import StopToken, stop_on_sigint


class TestStopToken:
    """Tests for StopToken."""

    def test_starts_running(self) -> None:
        """Test a fresh token is not stopped."""
        assert StopToken().stopped is False

    def test_stop_is_sticky(self) -> None:
        """Test stopping twice keeps the token stopped."""
        token = StopToken()
        token.stop()
        token.stop()

        assert token.stopped is True


class TestStopOnSigint:
    """Tests for stop_on_sigint."""

    @pytest.mark.asyncio
    async def test_sigint_sets_token(self) -> None:
        """Test SIGINT inside the block sets the token instead of raising."""
        token = StopToken()

        with stop_on_sigint(token):
            os.kill(os.getpid(), signal.SIGINT)
            for _ in range(100):
                if token.stopped:
                    break
                await asyncio.sleep(0.01)

        assert token.stopped is True

    @pytest.mark.asyncio
    async def test_handler_removed_on_exit(self) -> None:
        """Test the loop no longer owns SIGINT after the block."""
        token = StopToken()
        loop = asyncio.get_running_loop()

        with stop_on_sigint(token, loop):
            pass

        assert loop.remove_signal_handler(signal.SIGINT) is False
