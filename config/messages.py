# config/messages.py
"""User-facing message templates for the Game Jam Bot."""

from bot.services.channels import list_strings
from bot.services.roles import REQUESTABLE_ROLES

STANDARD_HELP = """\
Send me a PM to submit theme ideas.

Get a role to signify one of your skill sets with the command `!role <role name>`
and leave a role with `!leave <role name>`."""

JAMMER_HELP = """\
You can also ask for text and voice channels for your game with the command `!createchannels <game name>`
and rename them with `!renamechannels <new game name>`."""

ORGANIZER_HELP = """\
Since you have the **{organizer}** role, you also have access to the following commands:
- `!generatetheme` to generate a theme.
- `!showallthemes` to view all the theme ideas that have been submitted.
- `!removechannels <mention of user>` to remove a user's created channel.
- `!seteula <mention of channel with the message> <message ID>` to set the message acting as the server's EULA.
- `!setroleassign <mention of channel with the message> <message ID>` to set the server's role assignment message."""

JAMMER_REQUIRED = """\
Oo, you found a secret command. 😉
You will be able to use this command once you have been assigned the **{jammer}** role.
You will be able to get this role once the jam has started. \
The details on how to do so will be made available at that point."""

THEME_NOT_ONE_WORD = "Themes ideas should only be a single word."
NOT_ENOUGH_IDEAS = "Not enough ideas have been submitted yet."


def addressed(user_id: int, content: str) -> str:
    """Prefix a reply with a mention of the user it is meant for."""
    return f"<@{user_id}> {content}"


def format_help(is_jammer: bool, is_organizer: bool, organizer_role: str) -> str:
    """
    Build the help text for a member.

    Organizers see everything, Jammers see the channel commands as well as
    the standard text.
    """
    sections = [STANDARD_HELP]
    if is_jammer or is_organizer:
        sections.append(JAMMER_HELP)
    if is_organizer:
        sections.append(ORGANIZER_HELP.format(organizer=organizer_role))
    return "\n\n".join(sections)


def format_available_roles() -> str:
    roles = "\n".join(REQUESTABLE_ROLES)
    return f"You need to specify a valid role.\nAvailable roles are:```\n{roles}```"


def format_permission_denied(organizer_role: str, action: str) -> str:
    return (
        f"Since you lack the required role **{organizer_role}**, "
        f"you do not have permission to {action}."
    )


def format_theme_registered(idea: str, previous: str | None) -> str:
    if previous is None:
        return f'Theme idea "{idea}" registered, thanks!'
    return (
        "You can only submit one idea.\n"
        f'Theme idea "{idea}" registered, replacing your previous submission "{previous}".'
    )


def format_channel_results(
    verb: str,
    done: list[str],
    failed: list[str],
    game: str,
    gone_phrase: str,
) -> str:
    """
    Summarise a rename/removal over a team's category and channels.

    Args:
        verb: "Renamed" or "Removed"
        done: Descriptions of the channels that were changed
        failed: Names of the channels that no longer exist
        game: How to refer to the game, e.g. "your game **Foo**"
        gone_phrase: How to describe missing channels, e.g. "been removed, it seems"
    """
    if not done:
        return f"Category, text channel and voice channel for {game} have {gone_phrase}."
    if failed:
        have_has = "have" if len(failed) > 1 else "has"
        return (
            f"{verb} {list_strings(done)} for {game} "
            f"but its {list_strings(failed)} {have_has} {gone_phrase}."
        )
    return f"{verb} {list_strings(done)} for {game}."


def format_team_exists(game_name: str, text_id: int) -> str:
    return (
        f"You have already created channels for your game **{game_name}** here: <#{text_id}>\n"
        "Try using `!renamechannels <new game name>` instead if you wish to rename them."
    )


def format_team_created(game_name: str, text_id: int) -> str:
    return f"Channels created for your game **{game_name}** here: <#{text_id}>"


def format_reaction_message_set(
    kind_name: str, author_id: int, channel_id: int, content: str
) -> str:
    return (
        f"Server {kind_name} set to the following message by <@{author_id}> "
        f"in <#{channel_id}>:\n>>> {content}"
    )
