# bot/services/state.py
"""JSON-backed state that persists between bot restarts."""

import json
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from bot.models.team import Team

logger = logging.getLogger(__name__)

DEFAULT_STATE_FILE = "state.json"


class ReactionMessageKind(Enum):
    """Messages whose reactions the bot acts upon."""

    ROLE_ASSIGN = "role_assign"
    EULA = "eula"

    @property
    def display_name(self) -> str:
        return "role assignment message" if self is ReactionMessageKind.ROLE_ASSIGN else "EULA"


@dataclass
class MessageRef:
    """Channel and message id pair. Zero ids mean unset."""

    channel_id: int = 0
    message_id: int = 0

    def matches(self, channel_id: int, message_id: int) -> bool:
        return bool(self.message_id) and (channel_id, message_id) == (
            self.channel_id,
            self.message_id,
        )


class PersistentState:
    """
    Theme ideas, team channels and reaction message references.

    Loaded from disk on construction, or default initialised if the file does
    not exist. Every mutating method writes the whole state back to disk.
    Changes made to the file while the bot runs are not picked up.
    """

    def __init__(self, path: str | Path = DEFAULT_STATE_FILE) -> None:
        self.path = Path(path)
        self.theme_ideas: dict[int, str] = {}
        self.channel_creators: dict[int, Team] = {}
        self.reaction_messages: dict[ReactionMessageKind, MessageRef] = {
            kind: MessageRef() for kind in ReactionMessageKind
        }
        self.load()

    def load(self) -> None:
        """Load the data from disk if the file exists."""
        if not self.path.exists():
            logger.info(f"No state file at {self.path}, starting empty")
            return

        with open(self.path, encoding="utf-8") as f:
            data: dict[str, Any] = json.load(f)

        self.theme_ideas = {int(k): v for k, v in data.get("theme_ideas", {}).items()}
        self.channel_creators = {
            int(k): Team.from_dict(v) for k, v in data.get("channel_creators", {}).items()
        }
        for kind in ReactionMessageKind:
            ref = data.get(f"{kind.value}_message", {})
            self.reaction_messages[kind] = MessageRef(
                channel_id=int(ref.get("channel_id", 0)),
                message_id=int(ref.get("message_id", 0)),
            )
        logger.info(
            f"Loaded state from {self.path}: {len(self.theme_ideas)} theme ideas, "
            f"{len(self.channel_creators)} teams"
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "theme_ideas": {str(k): v for k, v in self.theme_ideas.items()},
            "channel_creators": {str(k): t.to_dict() for k, t in self.channel_creators.items()},
        }
        for kind, ref in self.reaction_messages.items():
            data[f"{kind.value}_message"] = {
                "channel_id": ref.channel_id,
                "message_id": ref.message_id,
            }
        return data

    def save(self) -> None:
        """
        Save the state to disk. Called after all modifications.

        The data is written to a temporary file next to the state file and
        moved over it, so an interrupted write never leaves a truncated file.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise

    def _save_or_undo(self, undo: Callable[[], None]) -> None:
        """Save, reverting the in-memory change with ``undo`` if the write fails."""
        try:
            self.save()
        except OSError:
            undo()
            raise

    def _restore(self, mapping: dict[Any, Any], key: Any, previous: Any) -> Callable[[], None]:
        """Undo callback putting ``previous`` back under ``key``, or dropping a new key."""

        def undo() -> None:
            if previous is None:
                mapping.pop(key, None)
            else:
                mapping[key] = previous

        return undo

    # Themes

    def add_theme(self, user_id: int, idea: str) -> str | None:
        """
        Store a theme idea, replacing the user's previous one.

        The idea is dropped again if it cannot be written to disk.

        Returns:
            The replaced idea, or None if this is the user's first submission
        """
        previous = self.theme_ideas.get(user_id)
        self.theme_ideas[user_id] = idea
        self._save_or_undo(self._restore(self.theme_ideas, user_id, previous))
        return previous

    # Team channels

    def has_created_channel(self, user_id: int) -> bool:
        return user_id in self.channel_creators

    def get_team(self, user_id: int) -> Team | None:
        return self.channel_creators.get(user_id)

    def register_team(self, user_id: int, team: Team) -> None:
        previous = self.channel_creators.get(user_id)
        self.channel_creators[user_id] = team
        self._save_or_undo(self._restore(self.channel_creators, user_id, previous))

    def remove_team(self, user_id: int) -> None:
        previous = self.channel_creators.pop(user_id, None)
        self._save_or_undo(self._restore(self.channel_creators, user_id, previous))

    # Reaction messages

    def get_reaction_message(self, kind: ReactionMessageKind) -> MessageRef:
        return self.reaction_messages[kind]

    def set_reaction_message(
        self, kind: ReactionMessageKind, channel_id: int, message_id: int
    ) -> None:
        previous = self.reaction_messages[kind]
        self.reaction_messages[kind] = MessageRef(channel_id=channel_id, message_id=message_id)
        self._save_or_undo(self._restore(self.reaction_messages, kind, previous))

    def find_reaction_message(self, channel_id: int, message_id: int) -> ReactionMessageKind | None:
        """Return which designated message, if any, the ids refer to."""
        for kind, ref in self.reaction_messages.items():
            if ref.matches(channel_id, message_id):
                return kind
        return None
