# bot/cogs/roles.py
"""Role cog: skill roles by command or reaction, and EULA acceptance."""

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from bot.services.channels import parse_channel_mention
from bot.services.roles import (
    EMOJI_ROLES,
    EULA_ACCEPT_EMOJI,
    emoji_to_role,
    find_role,
    resolve_requestable_role,
)
from bot.services.state import ReactionMessageKind
from config import messages

if TYPE_CHECKING:
    from bot.main import GameJamBot

logger = logging.getLogger(__name__)

REACTION_COMMANDS: dict[ReactionMessageKind, str] = {
    ReactionMessageKind.ROLE_ASSIGN: "setroleassign",
    ReactionMessageKind.EULA: "seteula",
}


class Roles(commands.Cog):
    """Cog granting skill roles and the participant role."""

    def __init__(self, bot: "GameJamBot") -> None:
        self.bot = bot
        self.config = bot.config
        self.state = bot.state

    async def _reply(self, ctx: commands.Context, content: str) -> None:
        await ctx.send(messages.addressed(ctx.author.id, content))

    def _seed_emojis(self, kind: ReactionMessageKind) -> list[str]:
        if kind is ReactionMessageKind.ROLE_ASSIGN:
            return list(EMOJI_ROLES)
        return [EULA_ACCEPT_EMOJI]

    def _reaction_role(self, kind: ReactionMessageKind, emoji: str) -> str | None:
        """Role granted by reacting with ``emoji`` on the given message kind."""
        if kind is ReactionMessageKind.ROLE_ASSIGN:
            return emoji_to_role(emoji)
        if emoji == EULA_ACCEPT_EMOJI:
            return self.config.jammer_role
        return None

    # Commands

    @commands.command(name="role")
    async def give_role(self, ctx: commands.Context, *, role_name: str = "") -> None:
        """Assign one of the requestable skill roles to the author."""
        if ctx.guild is None or not isinstance(ctx.author, discord.Member):
            return

        requested = resolve_requestable_role(role_name)
        role = find_role(ctx.guild.roles, requested) if requested else None
        if role is None:
            if requested:
                logger.warning(f"Requestable role {requested!r} does not exist on the server")
            await self._reply(ctx, messages.format_available_roles())
            return

        if role in ctx.author.roles:
            logger.info(f"{ctx.author} already has the role ({role.name}) they are trying to get")
            await self._reply(ctx, f"You already have the role **{role.name}**.")
            return

        try:
            await ctx.author.add_roles(role, reason="Requested with !role")
        except discord.HTTPException as e:
            logger.error(f"Couldn't assign role {role.name} to {ctx.author}: {e}")
            await self._reply(ctx, f"I couldn't assign you the role **{role.name}**.")
            return

        logger.info(f"New role {role.name} assigned to {ctx.author}")
        await self._reply(ctx, f"You have been assigned the role **{role.name}**.")

    @commands.command(name="leave")
    async def leave_role(self, ctx: commands.Context, *, role_name: str = "") -> None:
        """Remove one of the requestable skill roles from the author."""
        if ctx.guild is None or not isinstance(ctx.author, discord.Member):
            return

        requested = resolve_requestable_role(role_name)
        role = find_role(ctx.guild.roles, requested) if requested else None
        if role is None:
            await self._reply(ctx, messages.format_available_roles())
            return

        if role not in ctx.author.roles:
            logger.info(f"{ctx.author} tried to leave a role ({role.name}) they didn't have")
            await self._reply(ctx, f"You don't have the role **{role.name}**.")
            return

        try:
            await ctx.author.remove_roles(role, reason="Requested with !leave")
        except discord.HTTPException as e:
            logger.error(f"Couldn't remove role {role.name} from {ctx.author}: {e}")
            await self._reply(ctx, f"I couldn't remove the role **{role.name}** from you.")
            return

        logger.info(f"{ctx.author} left the role {role.name}")
        await self._reply(ctx, f"You have been stripped of the role **{role.name}**.")

    @commands.command(name="setroleassign")
    async def set_role_assign(
        self, ctx: commands.Context, channel: str = "", message_id: str = ""
    ) -> None:
        """Designate the message whose reactions grant skill roles. Organizers only."""
        await self._set_reaction_message(ctx, ReactionMessageKind.ROLE_ASSIGN, channel, message_id)

    @commands.command(name="seteula")
    async def set_eula(self, ctx: commands.Context, channel: str = "", message_id: str = "") -> None:
        """Designate the message acting as the server's EULA. Organizers only."""
        await self._set_reaction_message(ctx, ReactionMessageKind.EULA, channel, message_id)

    async def _set_reaction_message(
        self,
        ctx: commands.Context,
        kind: ReactionMessageKind,
        channel_ref: str,
        message_ref: str,
    ) -> None:
        """
        Validate the arguments, seed the message with its reactions and store it.

        Args:
            ctx: Command context
            kind: Which designated message is being set
            channel_ref: Channel mention, e.g. ``<#123>``
            message_ref: Numeric id of the message in that channel
        """
        logger.info(f"Got set {kind.display_name} request {ctx.message.content!r}")
        if ctx.guild is None:
            return

        if not self.bot.is_organizer(ctx.author):
            await self._reply(
                ctx,
                messages.format_permission_denied(
                    self.config.organizer_role, f"set the server {kind.display_name}"
                ),
            )
            logger.warning(
                f"User {ctx.author.id} tried to set {kind.display_name} without required role "
                f"{self.config.organizer_role!r}"
            )
            return

        usage = (
            f"Proper usage: `!{REACTION_COMMANDS[kind]} "
            "<mention of channel with the message> <message ID>`"
        )
        if not channel_ref or not message_ref:
            await self._reply(ctx, usage)
            return

        channel_id = parse_channel_mention(channel_ref)
        if channel_id is None:
            await self._reply(ctx, f"Invalid channel reference.\n{usage}")
            return
        if not message_ref.isdecimal():
            await self._reply(ctx, f"Message ID must be a number.\n{usage}")
            return

        not_found = f"No message with ID {message_ref} was found in <#{channel_id}>"
        channel = ctx.guild.get_channel(channel_id)
        if not isinstance(channel, discord.abc.Messageable):
            await self._reply(ctx, not_found)
            logger.info(not_found)
            return
        try:
            target = await channel.fetch_message(int(message_ref))
        except discord.HTTPException as e:
            await self._reply(ctx, not_found)
            logger.info(f"{not_found}: {e}")
            return

        try:
            for emoji in self._seed_emojis(kind):
                await target.add_reaction(emoji)
            self.state.set_reaction_message(kind, target.channel.id, target.id)
        except (discord.HTTPException, OSError) as e:
            logger.error(f"Failed setting {kind.display_name}: {e}")
            await self._reply(
                ctx, f"Could not set server {kind.display_name}. Check the logs for details."
            )
            return

        await self._reply(
            ctx,
            messages.format_reaction_message_set(
                kind.display_name, target.author.id, target.channel.id, target.content
            ),
        )

    # Reactions

    @commands.Cog.listener()
    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        """Grant the role matching a reaction on a designated message."""
        guild, kind = self._resolve_reaction(payload)
        if guild is None or kind is None or payload.emoji.name is None:
            return
        if self.bot.user is not None and payload.user_id == self.bot.user.id:
            return

        role_name = self._reaction_role(kind, payload.emoji.name)
        if role_name is None:
            return

        member = payload.member or await self._get_member(guild, payload.user_id)
        if member is None:
            return
        await self._change_role(guild, member, role_name, add=True, source=kind.display_name)

    @commands.Cog.listener()
    async def on_raw_reaction_remove(self, payload: discord.RawReactionActionEvent) -> None:
        """Remove the skill role of a reaction taken back from the role assignment message."""
        guild, kind = self._resolve_reaction(payload)
        if guild is None or kind is not ReactionMessageKind.ROLE_ASSIGN:
            return
        if payload.emoji.name is None:
            return

        role_name = emoji_to_role(payload.emoji.name)
        if role_name is None:
            return

        member = await self._get_member(guild, payload.user_id)
        if member is None:
            return
        await self._change_role(guild, member, role_name, add=False, source=kind.display_name)

    def _resolve_reaction(
        self, payload: discord.RawReactionActionEvent
    ) -> tuple[discord.Guild | None, ReactionMessageKind | None]:
        """Find the guild and designated message a reaction belongs to. DMs are ignored."""
        if payload.guild_id is None:
            return None, None
        kind = self.state.find_reaction_message(payload.channel_id, payload.message_id)
        if kind is None or not payload.emoji.is_unicode_emoji():
            return None, None
        return self.bot.get_guild(payload.guild_id), kind

    async def _get_member(self, guild: discord.Guild, user_id: int) -> discord.Member | None:
        member = guild.get_member(user_id)
        if member is not None:
            return member
        try:
            return await guild.fetch_member(user_id)
        except discord.HTTPException as e:
            logger.warning(f"Could not fetch member {user_id}: {e}")
            return None

    async def _change_role(
        self,
        guild: discord.Guild,
        member: discord.Member,
        role_name: str,
        add: bool,
        source: str,
    ) -> None:
        role = find_role(guild.roles, role_name)
        if role is None:
            logger.warning(f"No role {role_name} specified on the server")
            return
        try:
            if add:
                await member.add_roles(role, reason=f"Reacted to the {source}")
            else:
                await member.remove_roles(role, reason=f"Reaction removed from the {source}")
        except discord.HTTPException as e:
            action = "assign" if add else "remove"
            logger.error(f"{source}: couldn't {action} role {role.name} for {member}: {e}")
            return
        action = "assigned to" if add else "removed from"
        logger.info(f"{source}: role {role.name} {action} {member}")


async def setup(bot: "GameJamBot") -> None:
    """Set up the roles cog."""
    await bot.add_cog(Roles(bot))
