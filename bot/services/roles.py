# bot/services/roles.py
"""Role lookups and the skill roles members can request."""

from collections.abc import Iterable
from typing import Protocol

# Display names, in the order they are listed to users
REQUESTABLE_ROLES: list[str] = [
    "Programmer",
    "2D Artist",
    "3D Artist",
    "Sound Designer",
    "Musician",
    "Idea Guy",
    "Board Games",
]

EMOJI_ROLES: dict[str, str] = {
    "💻": "Programmer",
    "🎨": "2D Artist",
    "🗿": "3D Artist",
    "🔊": "Sound Designer",
    "🎵": "Musician",
    "💡": "Idea Guy",
    "🎲": "Board Games",
}

EULA_ACCEPT_EMOJI = "👍"

_REQUESTABLE_LOOKUP: dict[str, str] = {name.lower(): name for name in REQUESTABLE_ROLES}


class NamedRole(Protocol):
    name: str


class HasRoles(Protocol):
    roles: list[NamedRole]


def resolve_requestable_role(request: str) -> str | None:
    """Return the display name of a requestable role, matched case-insensitively."""
    return _REQUESTABLE_LOOKUP.get(" ".join(request.split()).lower())


def emoji_to_role(emoji: str) -> str | None:
    return EMOJI_ROLES.get(emoji)


def find_role(roles: Iterable[NamedRole], name: str) -> NamedRole | None:
    """Find a role by case-insensitive name."""
    wanted = name.lower()
    for role in roles:
        if role.name.lower() == wanted:
            return role
    return None


def has_role(member: HasRoles, name: str) -> bool:
    """Check whether a member holds the named role."""
    return find_role(member.roles, name) is not None
