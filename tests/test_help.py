# tests/test_help.py
from unittest.mock import AsyncMock, MagicMock

import pytest

from bot.help import JamHelpCommand


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("jammer", "organizer", "expected", "unexpected"),
    [
        (False, False, "!role <role name>", "!createchannels"),
        (True, False, "!createchannels", "!generatetheme"),
        (False, True, "!generatetheme", None),
    ],
)
async def test_help_depends_on_roles(
    fake_bot: MagicMock,
    ctx: MagicMock,
    jammer: bool,
    organizer: bool,
    expected: str,
    unexpected: str | None,
) -> None:
    fake_bot.is_jammer.return_value = jammer
    fake_bot.is_organizer.return_value = organizer
    ctx.bot = fake_bot

    help_command = JamHelpCommand()
    help_command.context = ctx
    await help_command.send_bot_help({})

    text = ctx.send.call_args[0][0]
    assert text.startswith("<@1> Send me a PM to submit theme ideas.")
    assert expected in text
    if unexpected:
        assert unexpected not in text


@pytest.mark.asyncio
async def test_help_for_unknown_command_still_sends_help(fake_bot: MagicMock, ctx: MagicMock) -> None:
    ctx.bot = fake_bot
    ctx.send = AsyncMock()
    help_command = JamHelpCommand()
    help_command.context = ctx
    await help_command.send_error_message("No command called \"nope\" found.")
    assert "Send me a PM" in ctx.send.call_args[0][0]
