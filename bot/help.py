# bot/help.py
"""Role-aware replacement for the default help command."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from config.messages import addressed, format_help

if TYPE_CHECKING:
    from bot.main import GameJamBot


class JamHelpCommand(commands.HelpCommand):
    """
    Sends the same help text whatever the arguments.

    Everyone sees the standard text. Jammers also see the channel commands
    and Organizers see everything.
    """

    async def send_help_text(self) -> None:
        ctx = self.context
        bot: "GameJamBot" = ctx.bot
        text = format_help(
            is_jammer=bot.is_jammer(ctx.author),
            is_organizer=bot.is_organizer(ctx.author),
            organizer_role=bot.config.organizer_role,
        )
        await ctx.send(addressed(ctx.author.id, text))

    async def send_bot_help(
        self, mapping: Mapping[commands.Cog | None, list[commands.Command]]
    ) -> None:
        await self.send_help_text()

    async def send_cog_help(self, cog: commands.Cog) -> None:
        await self.send_help_text()

    async def send_group_help(self, group: commands.Group) -> None:
        await self.send_help_text()

    async def send_command_help(self, command: commands.Command) -> None:
        await self.send_help_text()

    async def send_error_message(self, error: str) -> None:
        await self.send_help_text()

    def get_destination(self) -> discord.abc.Messageable:
        return self.context.channel
