# tests/test_state.py
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from bot.models.team import Team
from bot.services.state import PersistentState, ReactionMessageKind


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "state.json"


def test_missing_file_starts_empty(state_path: Path) -> None:
    state = PersistentState(state_path)
    assert state.theme_ideas == {}
    assert state.channel_creators == {}
    assert not state_path.exists()


def test_add_theme_returns_previous_submission(state_path: Path) -> None:
    state = PersistentState(state_path)
    assert state.add_theme(1, "Space") is None
    assert state.add_theme(1, "Time") == "Space"
    assert state.theme_ideas == {1: "Time"}


def test_state_survives_restart(state_path: Path) -> None:
    """Everything written should be loaded back by a new instance."""
    state = PersistentState(state_path)
    state.add_theme(42, "Gravity")
    state.register_team(7, Team("Foo", category_id=10, text_id=11, voice_id=12))
    state.set_reaction_message(ReactionMessageKind.EULA, 100, 200)

    reloaded = PersistentState(state_path)
    assert reloaded.theme_ideas == {42: "Gravity"}
    assert reloaded.get_team(7) == Team("Foo", category_id=10, text_id=11, voice_id=12)
    ref = reloaded.get_reaction_message(ReactionMessageKind.EULA)
    assert (ref.channel_id, ref.message_id) == (100, 200)


def test_user_ids_stored_as_json_keys(state_path: Path) -> None:
    state = PersistentState(state_path)
    state.add_theme(123456789012345678, "Loop")
    data = json.loads(state_path.read_text(encoding="utf-8"))
    assert data["theme_ideas"] == {"123456789012345678": "Loop"}


def test_remove_team(state_path: Path) -> None:
    state = PersistentState(state_path)
    state.register_team(7, Team("Foo", 1, 2, 3))
    assert state.has_created_channel(7)
    state.remove_team(7)
    assert not state.has_created_channel(7)
    assert not PersistentState(state_path).has_created_channel(7)


def test_find_reaction_message(state_path: Path) -> None:
    state = PersistentState(state_path)
    state.set_reaction_message(ReactionMessageKind.ROLE_ASSIGN, 5, 6)
    assert state.find_reaction_message(5, 6) is ReactionMessageKind.ROLE_ASSIGN
    assert state.find_reaction_message(5, 7) is None


def test_unset_reaction_message_never_matches(state_path: Path) -> None:
    """Zero ids mean the message was never designated."""
    state = PersistentState(state_path)
    assert state.find_reaction_message(0, 0) is None


def test_failed_save_keeps_previous_file(state_path: Path) -> None:
    """An interrupted write must not leave a truncated state file behind."""
    state = PersistentState(state_path)
    state.add_theme(1, "Space")
    with patch("bot.services.state.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            state.add_theme(2, "Time")
    assert PersistentState(state_path).theme_ideas == {1: "Space"}


def test_failed_save_drops_new_theme(state_path: Path) -> None:
    state = PersistentState(state_path)
    state.add_theme(1, "Space")
    with patch("bot.services.state.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            state.add_theme(5, "Gravity")
        with pytest.raises(OSError):
            state.add_theme(1, "Time")
    assert state.theme_ideas == {1: "Space"}


def test_failed_save_restores_teams_and_messages(state_path: Path) -> None:
    state = PersistentState(state_path)
    state.register_team(7, Team("Foo", 1, 2, 3))
    state.set_reaction_message(ReactionMessageKind.EULA, 100, 200)
    with patch("bot.services.state.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            state.register_team(8, Team("Bar", 4, 5, 6))
        with pytest.raises(OSError):
            state.remove_team(7)
        with pytest.raises(OSError):
            state.set_reaction_message(ReactionMessageKind.EULA, 300, 400)

    assert state.channel_creators == {7: Team("Foo", 1, 2, 3)}
    assert state.find_reaction_message(100, 200) is ReactionMessageKind.EULA
    assert state.find_reaction_message(300, 400) is None
