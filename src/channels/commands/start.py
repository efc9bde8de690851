"""
Start Command Module.

Handles the /start command - shows the welcome message.
"""

from typing import Optional

from src.channels.commands.base import BaseCommand, CommandResult
from src.search.formatter import GREETING_MESSAGE


class StartCommand(BaseCommand):
    """Welcome command - shows introduction and example queries."""

    name = "start"
    description = "Start using the bot"
    usage = "/start"

    async def execute(
        self,
        user_id: str,
        args: str,
        context: Optional[dict] = None,
    ) -> CommandResult:
        """
        Execute /start command.

        Args:
            user_id: Platform user ID (chat_id)
            args: Command arguments (unused)
            context: Optional context

        Returns:
            Welcome message
        """
        return CommandResult.ok(
            message=GREETING_MESSAGE,
            title="welcome",
            user_id=user_id,
        )
