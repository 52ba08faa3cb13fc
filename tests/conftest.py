# tests/conftest.py
"""Shared fixtures: a fake bot and command context for cog tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from bot.config import Config
from bot.services.state import PersistentState
from bot.services.team_channels import TeamChannelService


@pytest.fixture
def state(tmp_path: Path) -> PersistentState:
    return PersistentState(tmp_path / "state.json")


@pytest.fixture
def fake_bot(state: PersistentState) -> MagicMock:
    """Stand-in for GameJamBot with real state and config."""
    bot = MagicMock()
    bot.config = Config(discord_token="token", organizer_role="Organizer", jammer_role="Jammer")
    bot.state = state
    bot.team_channels = TeamChannelService(state)
    bot.user.id = 999
    bot.is_organizer.return_value = False
    bot.is_jammer.return_value = False
    return bot


@pytest.fixture
def ctx() -> MagicMock:
    ctx = MagicMock()
    ctx.author.id = 1
    ctx.send = AsyncMock()
    return ctx
