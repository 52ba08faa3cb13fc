# bot/services/channels.py
"""Text helpers for team channel commands."""

import re

INVALID_NAME_PATTERN = re.compile(r"[`|]+")
MARKDOWN_ESCAPE_PATTERN = re.compile(r"[-_+*\"#=.⋅\\<>{}]+")
USER_MENTION_PATTERN = re.compile(r"^<@!?(\d+)>$")
CHANNEL_MENTION_PATTERN = re.compile(r"^<#(\d+)>$")


def is_valid_game_name(name: str) -> bool:
    """Game names cannot contain backticks or pipes."""
    return not INVALID_NAME_PATTERN.search(name)


def to_markdown_safe(name: str) -> str:
    """Escape characters that Discord would render as markdown."""
    return MARKDOWN_ESCAPE_PATTERN.sub(lambda m: "\\" + m.group(0), name)


def list_strings(items: list[str]) -> str:
    """
    Join items as an English list.

    >>> list_strings(["a", "b", "c"])
    'a, b and c'
    """
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + " and " + items[-1]


def parse_user_mention(text: str) -> int | None:
    """Extract the user id from a ``<@id>`` or ``<@!id>`` mention."""
    match = USER_MENTION_PATTERN.match(text.strip())
    if match:
        return int(match.group(1))
    return None


def parse_channel_mention(text: str) -> int | None:
    """Extract the channel id from a ``<#id>`` mention."""
    match = CHANNEL_MENTION_PATTERN.match(text.strip())
    if match:
        return int(match.group(1))
    return None
