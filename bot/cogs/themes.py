# bot/cogs/themes.py
"""Theme cog collecting ideas by direct message and generating the jam theme."""

import logging
import random
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from bot.services.themes import format_all_ideas, generate_theme, is_valid_idea
from config import messages

if TYPE_CHECKING:
    from bot.main import GameJamBot

logger = logging.getLogger(__name__)


class Themes(commands.Cog):
    """Cog for theme submissions and theme generation."""

    def __init__(self, bot: "GameJamBot") -> None:
        self.bot = bot
        self.config = bot.config
        self.state = bot.state
        self.rng = random.Random()

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """Treat every direct message as a theme submission."""
        if message.author.bot or message.guild is not None:
            return

        idea = message.content.strip()
        if not is_valid_idea(idea):
            await message.channel.send(messages.THEME_NOT_ONE_WORD)
            return

        try:
            previous = self.state.add_theme(message.author.id, idea)
        except OSError as e:
            logger.error(f"Failed to save theme from {message.author.id}: {e}")
            await message.channel.send("Your theme idea could not be saved. Please try again later.")
            return

        logger.info(f"Theme idea from {message.author.id} registered (replaced: {previous is not None})")
        await message.channel.send(messages.format_theme_registered(idea, previous))

    async def _deny(self, ctx: commands.Context, action: str) -> None:
        await ctx.send(
            messages.addressed(
                ctx.author.id,
                messages.format_permission_denied(self.config.organizer_role, action),
            )
        )
        logger.warning(
            f"User {ctx.author.id} tried to {action} without required role "
            f"{self.config.organizer_role!r}"
        )

    @commands.command(name="generatetheme")
    async def generate_theme_command(self, ctx: commands.Context) -> None:
        """Combine two random submissions into the jam theme. Organizers only."""
        if not self.bot.is_organizer(ctx.author):
            await self._deny(ctx, "generate themes")
            return

        theme = generate_theme(self.state.theme_ideas.values(), rng=self.rng)
        text = messages.NOT_ENOUGH_IDEAS if theme is None else f"The theme is: {theme}"
        try:
            await ctx.send(messages.addressed(ctx.author.id, text))
        except discord.HTTPException as e:
            logger.error(f"Failed to send theme message: {e}. Message should have been: {text!r}")
            await ctx.send(
                messages.addressed(
                    ctx.author.id, "Failed to send theme. Has someone been naughty? 🤔"
                )
            )

    @commands.command(name="showallthemes")
    async def show_all_themes(self, ctx: commands.Context) -> None:
        """List every submitted theme idea. Organizers only."""
        if not self.bot.is_organizer(ctx.author):
            await self._deny(ctx, "see all the theme ideas")
            return

        if not self.state.theme_ideas:
            await ctx.send(messages.addressed(ctx.author.id, "No theme ideas have been submitted yet."))
            return

        all_ideas = format_all_ideas(self.state.theme_ideas.values())
        try:
            await ctx.send(
                messages.addressed(
                    ctx.author.id, f"The theme ideas submitted are ```{all_ideas}```"
                )
            )
        except discord.HTTPException as e:
            logger.error(f"Tried to send all themes but something went wrong: {e}")
            await ctx.send(
                messages.addressed(
                    ctx.author.id, "Failed to send all themes. I don't know how this happened."
                )
            )


async def setup(bot: "GameJamBot") -> None:
    """Set up the themes cog."""
    await bot.add_cog(Themes(bot))
