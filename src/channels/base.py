"""
Base Channel Module.

Shared formatter behavior for chat channels.
"""

from abc import ABC, abstractmethod

from src.channels.commands.base import CommandResult


class BaseFormatter(ABC):
    """
    Base class for message formatters.

    Subclasses turn command results and search responses into platform
    markup; splitting oversized messages is shared.
    """

    # Longest message the platform accepts
    max_length: int = 4096

    @abstractmethod
    def format_command_result(self, result: CommandResult) -> str:
        """Format a command result into platform markup."""

    @abstractmethod
    def format_response(self, text: str) -> str:
        """Format a search response (`**bold**` markers) into platform markup."""

    def split_message(self, text: str, limit: int | None = None) -> list[str]:
        """
        Split a long message on line boundaries.

        Args:
            text: Formatted message
            limit: Maximum characters per chunk (defaults to max_length)

        Returns:
            List of chunks, each at most `limit` characters
        """
        limit = limit or self.max_length
        if len(text) <= limit:
            return [text]

        chunks: list[str] = []
        current = ""
        for line in text.split("\n"):
            if len(line) > limit:
                if current:
                    chunks.append(current)
                    current = ""
                *wrapped, line = self._wrap_line(line, limit)
                chunks.extend(wrapped)

            candidate = f"{current}\n{line}" if current else line
            if len(candidate) > limit:
                chunks.append(current)
                current = line
            else:
                current = candidate

        if current:
            chunks.append(current)
        return chunks

    def _wrap_line(self, line: str, limit: int) -> list[str]:
        """Hard-wrap a single over-long line into pieces of at most `limit` characters."""
        return [line[i:i + limit] for i in range(0, len(line), limit)]
