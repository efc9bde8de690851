"""
Help Command Module.

Handles the /help command - shows search usage.
"""

from typing import Optional

from src.channels.commands.base import BaseCommand, CommandResult
from src.search.formatter import HELP_MESSAGE


class HelpCommand(BaseCommand):
    """Help command - shows how to write search queries."""

    name = "help"
    description = "Show help"
    usage = "/help"

    async def execute(
        self,
        user_id: str,
        args: str,
        context: Optional[dict] = None,
    ) -> CommandResult:
        """
        Execute /help command.

        Args:
            user_id: Platform user ID
            args: Command arguments (unused)
            context: Optional context

        Returns:
            Search usage guide
        """
        return CommandResult.ok(message=HELP_MESSAGE, title="help")
