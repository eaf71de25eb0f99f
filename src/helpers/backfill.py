"""Base classes and utilities for backfill operations."""

from abc import ABC, abstractmethod

from rich.console import Console


class BackfillBase(ABC):
    """Abstract base class for backfill operations.

    Provides common functionality for all backfill classes including:
    - Console initialization for banner and summary output

    Subclasses must implement:
    - run(): Main backfill orchestration logic
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize backfill with common configuration.

        Args:
            console: Rich console to print to (default: a new stdout console)
        """
        self.console = console or Console()

    @abstractmethod
    async def run(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        """Run the backfill process.

        This method must be implemented by subclasses to define
        their specific backfill logic and orchestration.
        """
        ...


__all__ = ["BackfillBase"]
