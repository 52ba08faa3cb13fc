# tests/test_roles.py
from unittest.mock import MagicMock

from bot.services.roles import (
    EMOJI_ROLES,
    REQUESTABLE_ROLES,
    emoji_to_role,
    find_role,
    has_role,
    resolve_requestable_role,
)


def _role(name: str) -> MagicMock:
    role = MagicMock()
    role.name = name
    return role


def _member(*role_names: str) -> MagicMock:
    member = MagicMock()
    member.roles = [_role(name) for name in role_names]
    return member


def test_has_role_case_insensitive() -> None:
    member = _member("@everyone", "organizer")
    assert has_role(member, "Organizer")
    assert not has_role(member, "Jammer")


def test_find_role_returns_matching_role() -> None:
    roles = [_role("Programmer"), _role("2D Artist")]
    assert find_role(roles, "2d artist") is roles[1]
    assert find_role(roles, "3D Artist") is None


def test_resolve_requestable_role() -> None:
    assert resolve_requestable_role("sound designer") == "Sound Designer"
    assert resolve_requestable_role("  IDEA   guy ") == "Idea Guy"
    assert resolve_requestable_role("Organizer") is None
    assert resolve_requestable_role("") is None


def test_every_emoji_maps_to_a_requestable_role() -> None:
    assert set(EMOJI_ROLES.values()) == set(REQUESTABLE_ROLES)
    assert emoji_to_role("💻") == "Programmer"
    assert emoji_to_role("🎲") == "Board Games"
    assert emoji_to_role("🙂") is None
