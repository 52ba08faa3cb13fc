# bot/cogs/channels.py
"""Team channel cog providing !createchannels, !renamechannels and !removechannels."""

import logging
from typing import TYPE_CHECKING

from discord.ext import commands

from bot.services.channels import parse_user_mention
from bot.services.team_channels import ChannelCreationError, NoTeamError, TeamExistsError
from config import messages

if TYPE_CHECKING:
    from bot.main import GameJamBot

logger = logging.getLogger(__name__)


class TeamChannels(commands.Cog):
    """Cog letting jammers create channels for their game."""

    def __init__(self, bot: "GameJamBot") -> None:
        self.bot = bot
        self.config = bot.config
        self.service = bot.team_channels

    async def _reply(self, ctx: commands.Context, content: str) -> None:
        await ctx.send(messages.addressed(ctx.author.id, content))

    async def _check_jammer(self, ctx: commands.Context) -> bool:
        """
        Check whether the author may use the team channel commands.

        The commands stay hidden until the jam starts, so members without the
        Jammer or Organizer role are told how they will get access.
        """
        if self.bot.is_jammer(ctx.author) or self.bot.is_organizer(ctx.author):
            return True
        await self._reply(ctx, messages.JAMMER_REQUIRED.format(jammer=self.config.jammer_role))
        return False

    @commands.command(name="createchannels")
    async def create_channels(self, ctx: commands.Context, *, game_name: str = "") -> None:
        """Create a category with a text and a voice channel for the author's game."""
        if ctx.guild is None or not await self._check_jammer(ctx):
            return

        try:
            team = await self.service.create_team(ctx.guild, ctx.author.id, game_name)
        except TeamExistsError as e:
            await self._reply(ctx, messages.format_team_exists(e.team.game_name, e.team.text_id))
            return
        except ChannelCreationError as e:
            await self._reply(ctx, str(e))
            return

        await self._reply(ctx, messages.format_team_created(team.game_name, team.text_id))

    @commands.command(name="renamechannels")
    async def rename_channels(self, ctx: commands.Context, *, new_name: str = "") -> None:
        """Rename the author's team channels."""
        if ctx.guild is None or not await self._check_jammer(ctx):
            return

        try:
            outcome = await self.service.rename_team(ctx.guild, ctx.author.id, new_name)
        except ChannelCreationError as e:
            await self._reply(ctx, str(e))
            return
        except NoTeamError:
            await self._reply(
                ctx,
                "You have not created a channel yet.\n"
                "Try using `!createchannels <game name>` instead.",
            )
            return

        await self._reply(
            ctx,
            messages.format_channel_results(
                "Renamed",
                outcome.done,
                outcome.failed,
                f"your game **{outcome.team.game_name}**",
                "been removed, it seems",
            ),
        )

    @commands.command(name="removechannels")
    async def remove_channels(self, ctx: commands.Context, user: str = "") -> None:
        """Remove the team channels of the mentioned user. Organizers only."""
        if ctx.guild is None:
            return
        if not self.bot.is_organizer(ctx.author):
            await self._reply(
                ctx, f"You need to be an **{self.config.organizer_role}** to use this command."
            )
            logger.warning(f"User {ctx.author.id} tried to remove channels without permission")
            return

        if not user:
            await self._reply(ctx, "You forgot to provide a user id.")
            return

        user_id = parse_user_mention(user)
        if user_id is None:
            await self._reply(ctx, "Invalid user reference.")
            return

        try:
            outcome = await self.service.remove_team(ctx.guild, user_id)
        except NoTeamError:
            await self._reply(ctx, "That user does not have any team channels.")
            return

        await self._reply(
            ctx,
            messages.format_channel_results(
                "Removed",
                outcome.done,
                outcome.failed,
                f"the game **{outcome.team.game_name}**",
                "already been removed",
            ),
        )


async def setup(bot: "GameJamBot") -> None:
    """Set up the team channels cog."""
    await bot.add_cog(TeamChannels(bot))
