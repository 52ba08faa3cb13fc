# bot/services/team_channels.py
"""Creation, renaming and removal of per-team channels."""

import logging
from dataclasses import dataclass, field, replace

import discord

from bot.models.team import Team
from bot.services.channels import is_valid_game_name, to_markdown_safe
from bot.services.state import PersistentState

logger = logging.getLogger(__name__)

CATEGORY_PREFIX = "Team: "
INVALID_NAME_MESSAGE = "Game names cannot contain the characters ` or |"


def text_topic(game_name: str) -> str:
    return f"Work on and playtesting of the game {game_name}."


class ChannelCreationError(Exception):
    """Raised when team channels cannot be created. The message is shown to the user."""


class TeamExistsError(ChannelCreationError):
    """Raised when a user who already owns a team asks for another one."""

    def __init__(self, team: Team) -> None:
        super().__init__(f"Channels for {team.game_name!r} already exist")
        self.team = team


class NoTeamError(Exception):
    """Raised when a user has no team channels to act upon."""


@dataclass
class ChannelOutcome:
    """Which of a team's channels an operation reached and which were already gone."""

    team: Team
    done: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class TeamChannelService:
    """Manages the category, text and voice channel of each team."""

    def __init__(self, state: PersistentState) -> None:
        self._state = state

    async def create_team(self, guild: discord.Guild, user_id: int, game_name: str) -> Team:
        """
        Create a category with a text and a voice channel for a user's game.

        Args:
            guild: Guild to create the channels in
            user_id: The requesting user, who may own one team
            game_name: Raw game name from the command

        Returns:
            The recorded Team

        Raises:
            ChannelCreationError: If the request is invalid or Discord refuses it
        """
        existing = self._state.get_team(user_id)
        if existing is not None:
            raise TeamExistsError(existing)

        game_name = " ".join(game_name.split())
        logger.info(f"Got a request for channels for the game {game_name!r}")
        if not game_name:
            raise ChannelCreationError("You need to specify a game name.")
        if not is_valid_game_name(game_name):
            raise ChannelCreationError(INVALID_NAME_MESSAGE)

        reason = f"Team channels requested by user {user_id}"
        created: list[discord.abc.GuildChannel] = []
        try:
            try:
                category = await guild.create_category(CATEGORY_PREFIX + game_name, reason=reason)
            except discord.HTTPException as e:
                raise ChannelCreationError("Category creation failed.") from e
            created.append(category)

            try:
                text = await guild.create_text_channel(
                    game_name, category=category, topic=text_topic(game_name), reason=reason
                )
            except discord.HTTPException as e:
                raise ChannelCreationError("Text channel creation failed.") from e
            created.append(text)

            try:
                voice = await guild.create_voice_channel(game_name, category=category, reason=reason)
            except discord.HTTPException as e:
                raise ChannelCreationError("Voice channel creation failed.") from e
        except ChannelCreationError as e:
            logger.error(f"Channel creation failed: {e} ({e.__cause__})")
            await self._discard(created)
            raise

        team = Team(
            game_name=to_markdown_safe(game_name),
            category_id=category.id,
            text_id=text.id,
            voice_id=voice.id,
        )
        self._state.register_team(user_id, team)
        logger.info(f"Created team channels for {game_name!r} (user {user_id})")
        return team

    async def rename_team(self, guild: discord.Guild, user_id: int, new_name: str) -> ChannelOutcome:
        """
        Rename a user's category, text channel and voice channel.

        Raises:
            ChannelCreationError: If the new name is invalid
            NoTeamError: If the user has not created any channels
        """
        new_name = " ".join(new_name.split())
        if not new_name:
            raise ChannelCreationError("You need to specify a game name.")
        if not is_valid_game_name(new_name):
            raise ChannelCreationError(INVALID_NAME_MESSAGE)

        team = self._state.get_team(user_id)
        if team is None:
            raise NoTeamError(user_id)

        team = replace(team, game_name=to_markdown_safe(new_name))
        self._state.register_team(user_id, team)
        outcome = ChannelOutcome(team=team)

        category = await self._edit(guild, team.category_id, name=CATEGORY_PREFIX + new_name)
        if category is not None:
            outcome.done.append(f"category to **{category.name}**")
        else:
            outcome.failed.append("category")

        text = await self._edit(guild, team.text_id, name=new_name, topic=text_topic(team.game_name))
        if text is not None:
            outcome.done.append(f"text channel to **#{text.name}** (found here: <#{text.id}>)")
        else:
            outcome.failed.append("text channel")

        voice = await self._edit(guild, team.voice_id, name=new_name)
        if voice is not None:
            outcome.done.append(f"voice channel to **{voice.name}**")
        else:
            outcome.failed.append("voice channel")

        logger.info(
            f"Renamed team of user {user_id} to {new_name!r}: "
            f"{len(outcome.done)} renamed, {len(outcome.failed)} missing"
        )
        return outcome

    async def remove_team(self, guild: discord.Guild, user_id: int) -> ChannelOutcome:
        """
        Delete a user's team channels and forget the team.

        Raises:
            NoTeamError: If the user has not created any channels
        """
        team = self._state.get_team(user_id)
        if team is None:
            raise NoTeamError(user_id)

        outcome = ChannelOutcome(team=team)
        reason = f"Team channels of user {user_id} removed"

        text = await self._delete(guild, team.text_id, reason)
        if text is not None:
            outcome.done.append(f"text channel **#{text.name}**")
        else:
            outcome.failed.append("text channel")

        voice = await self._delete(guild, team.voice_id, reason)
        if voice is not None:
            outcome.done.append(f"voice channel **{voice.name}**")
        else:
            outcome.failed.append("voice channel")

        # Deleted last so the channels are not moved out of it first
        category = await self._delete(guild, team.category_id, reason)
        if category is not None:
            outcome.done.insert(0, f"category **{category.name}**")
        else:
            outcome.failed.insert(0, "category")

        self._state.remove_team(user_id)
        logger.info(f"Removed team {team.game_name!r} of user {user_id}")
        return outcome

    async def _edit(
        self, guild: discord.Guild, channel_id: int, **changes: str
    ) -> discord.abc.GuildChannel | None:
        channel = guild.get_channel(channel_id)
        if channel is None:
            return None
        try:
            updated = await channel.edit(**changes)
        except discord.NotFound:
            return None
        except discord.HTTPException as e:
            logger.warning(f"Failed to edit channel {channel_id}: {e}")
            return None
        return updated or channel

    async def _delete(
        self, guild: discord.Guild, channel_id: int, reason: str
    ) -> discord.abc.GuildChannel | None:
        channel = guild.get_channel(channel_id)
        if channel is None:
            return None
        try:
            await channel.delete(reason=reason)
        except discord.NotFound:
            return None
        except discord.HTTPException as e:
            logger.warning(f"Failed to delete channel {channel_id}: {e}")
            return None
        return channel

    async def _discard(self, channels: list[discord.abc.GuildChannel]) -> None:
        """Delete channels left over from a failed creation."""
        for channel in reversed(channels):
            try:
                await channel.delete(reason="Team channel creation failed")
            except discord.HTTPException as e:
                logger.warning(f"Could not clean up channel {channel.id}: {e}")
