"""
Search Command Module.

Handles the /search command - runs a listing search on the arguments.
"""

from typing import Optional

from loguru import logger

from src.channels.commands.base import BaseCommand, CommandResult


class SearchCommand(BaseCommand):
    """Search command - answers the query given as arguments."""

    name = "search"
    description = "Search listings"
    usage = "/search <query>"

    async def execute(
        self,
        user_id: str,
        args: str,
        context: Optional[dict] = None,
    ) -> CommandResult:
        """
        Execute /search command.

        Args:
            user_id: Platform user ID
            args: Free-text query
            context: Optional context

        Returns:
            Search response text
        """
        if not self._service:
            logger.error("Search service not available")
            return CommandResult.fail("시스템 오류입니다. 잠시 후 다시 시도해주세요.")

        response = await self._service.handle_user_query(args)
        return CommandResult.ok(message=response, title="search", query=args)
