"""
Telegram Formatter Module.

Formats messages for Telegram using HTML markup.
"""

import re
from typing import Optional

from src.channels.base import BaseFormatter
from src.channels.commands.base import CommandResult

# Telegram rejects messages longer than this
MAX_MESSAGE_LENGTH = 4096

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_BOLD_OPEN = "<b>"
_BOLD_CLOSE = "</b>"


class TelegramFormatter(BaseFormatter):
    """Formats messages for Telegram platform."""

    max_length = MAX_MESSAGE_LENGTH

    def format_command_result(self, result: CommandResult) -> str:
        """
        Format command result for Telegram.

        Args:
            result: CommandResult from command execution

        Returns:
            HTML formatted message for Telegram
        """
        if not result.success:
            return f"❌ {self._escape_html(result.error or 'Unknown error')}"

        return self.format_response(result.message)

    def format_response(self, text: str) -> str:
        """
        Convert a markdown-style response into Telegram HTML.

        Args:
            text: Response text with `**bold**` markers

        Returns:
            HTML formatted message
        """
        return _BOLD.sub(r"<b>\1</b>", self._escape_html(text))

    def _wrap_line(self, line: str, limit: int) -> list[str]:
        """
        Hard-wrap an over-long HTML line.

        Cuts never split an entity or a tag, and a bold span crossing a cut
        is closed before it and reopened after it.
        """
        pieces: list[str] = []
        while len(line) > limit:
            cut = self._cut_point(line, limit)
            if _opens_bold(line[:cut]):
                cut = self._cut_point(line, min(cut, limit - len(_BOLD_CLOSE)))

            piece, line = line[:cut], line[cut:]
            if _opens_bold(piece):
                piece += _BOLD_CLOSE
                line = _BOLD_OPEN + line
            pieces.append(piece)

        pieces.append(line)
        return pieces

    def _cut_point(self, line: str, cut: int) -> int:
        """Move a cut index back to the start of an entity or tag it would split."""
        safe = cut
        amp = line.rfind("&", 0, safe)
        if amp != -1 and ";" not in line[amp:safe]:
            safe = amp
        lt = line.rfind("<", 0, safe)
        if lt != -1 and ">" not in line[lt:safe]:
            safe = lt
        # Always make progress, even past a reopened bold tag
        return safe if safe > len(_BOLD_OPEN) else cut

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters."""
        if not text:
            return ""
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
        )


def _opens_bold(text: str) -> bool:
    return text.count(_BOLD_OPEN) > text.count(_BOLD_CLOSE)


# Singleton instance
_formatter: Optional[TelegramFormatter] = None


def get_telegram_formatter() -> TelegramFormatter:
    """Get TelegramFormatter singleton."""
    global _formatter
    if _formatter is None:
        _formatter = TelegramFormatter()
    return _formatter
