# tests/test_config.py
import os
from unittest.mock import patch


def test_config_loads_discord_token() -> None:
    """Config should load DISCORD_TOKEN from environment."""
    with patch.dict(os.environ, {"DISCORD_TOKEN": "test-token-123"}):
        import importlib

        import bot.config
        importlib.reload(bot.config)
        config = bot.config.Config()
        assert config.discord_token == "test-token-123"


def test_config_role_defaults() -> None:
    """Organizer and Jammer role names should have defaults."""
    with patch.dict(os.environ, {"DISCORD_TOKEN": "token"}, clear=True):
        from bot.config import Config
        cfg = Config()
        assert cfg.organizer_role == "Organizer"
        assert cfg.jammer_role == "Jammer"
        assert cfg.state_file == "state.json"
        assert cfg.health_port == 8080


def test_config_role_overrides_are_stripped() -> None:
    env = {"DISCORD_TOKEN": "token", "ORGANIZER_ROLE": " Staff ", "JAMMER_ROLE": "Participant"}
    with patch.dict(os.environ, env, clear=False):
        from bot.config import Config
        cfg = Config()
        assert cfg.organizer_role == "Staff"
        assert cfg.jammer_role == "Participant"


def test_config_validate_requires_token() -> None:
    """Missing DISCORD_TOKEN should be reported."""
    with patch.dict(os.environ, {}, clear=True):
        from bot.config import Config
        errors = Config().validate()
        assert "DISCORD_TOKEN is required" in errors


def test_config_validate_ok() -> None:
    with patch.dict(os.environ, {"DISCORD_TOKEN": "token"}, clear=True):
        from bot.config import Config
        assert Config().validate() == []
