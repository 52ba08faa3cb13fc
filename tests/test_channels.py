# tests/test_channels.py
from bot.services.channels import (
    is_valid_game_name,
    list_strings,
    parse_channel_mention,
    parse_user_mention,
    to_markdown_safe,
)


def test_game_name_rejects_backtick_and_pipe() -> None:
    assert is_valid_game_name("Super Game 3000")
    assert not is_valid_game_name("Bad`Name")
    assert not is_valid_game_name("Bad|Name")


def test_to_markdown_safe_escapes_markdown() -> None:
    assert to_markdown_safe("my_game") == "my\\_game"
    assert to_markdown_safe("*bold*") == "\\*bold\\*"
    assert to_markdown_safe("Plain") == "Plain"


def test_list_strings() -> None:
    assert list_strings([]) == ""
    assert list_strings(["a"]) == "a"
    assert list_strings(["a", "b"]) == "a and b"
    assert list_strings(["a", "b", "c"]) == "a, b and c"


def test_parse_user_mention() -> None:
    assert parse_user_mention("<@123>") == 123
    assert parse_user_mention("<@!456>") == 456
    assert parse_user_mention("123") is None
    assert parse_user_mention("<#123>") is None


def test_parse_channel_mention() -> None:
    assert parse_channel_mention("<#789>") == 789
    assert parse_channel_mention("<@789>") is None
    assert parse_channel_mention("general") is None
