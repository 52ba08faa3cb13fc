from bot.services.channels import (
    is_valid_game_name,
    list_strings,
    parse_channel_mention,
    parse_user_mention,
    to_markdown_safe,
)
from bot.services.roles import EMOJI_ROLES, REQUESTABLE_ROLES, find_role, has_role
from bot.services.state import MessageRef, PersistentState, ReactionMessageKind
from bot.services.team_channels import (
    ChannelCreationError,
    NoTeamError,
    TeamChannelService,
    TeamExistsError,
)
from bot.services.themes import format_all_ideas, generate_theme, is_valid_idea

__all__ = [
    "ChannelCreationError",
    "EMOJI_ROLES",
    "find_role",
    "format_all_ideas",
    "generate_theme",
    "has_role",
    "is_valid_game_name",
    "is_valid_idea",
    "list_strings",
    "MessageRef",
    "NoTeamError",
    "parse_channel_mention",
    "parse_user_mention",
    "PersistentState",
    "ReactionMessageKind",
    "REQUESTABLE_ROLES",
    "TeamChannelService",
    "TeamExistsError",
    "to_markdown_safe",
]
