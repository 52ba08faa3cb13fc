# bot/cogs/general.py
"""General cog: liveness check and help on mention."""

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from config.messages import addressed

if TYPE_CHECKING:
    from bot.main import GameJamBot

logger = logging.getLogger(__name__)


class General(commands.Cog):
    """Commands and listeners that are not tied to a jam feature."""

    def __init__(self, bot: "GameJamBot") -> None:
        self.bot = bot

    @commands.command(name="ping")
    async def ping_command(self, ctx: commands.Context) -> None:
        """Simple test command to verify the bot is responding."""
        logger.info(f"Ping command received from {ctx.author.id}")
        await ctx.send(addressed(ctx.author.id, "Pong! Bot is working."))

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """Reply with the help text when mentioned outside of a command."""
        if message.author.bot or message.guild is None or self.bot.user is None:
            return
        if message.content.startswith("!"):
            return
        if self.bot.user not in message.mentions:
            return

        logger.info(f"Mentioned by {message.author.id} in channel {message.channel.id}")
        ctx = await self.bot.get_context(message)
        await ctx.send_help()


async def setup(bot: "GameJamBot") -> None:
    """Set up the general cog."""
    await bot.add_cog(General(bot))
