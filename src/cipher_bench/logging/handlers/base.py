from abc import ABC, abstractmethod


class BaseLogHandler(ABC):
    """Destination for flushed log lines, in addition to stderr."""

    @abstractmethod
    def push(self, buffer: list[str]) -> None:
        """Write a batch of formatted log lines.

        Args:
            buffer (list[str]): Lines in the order they were logged.
        """

    def close(self) -> None:
        """Release any resources held by the handler."""
