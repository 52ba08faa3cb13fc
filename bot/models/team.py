# bot/models/team.py
"""Team channel data model."""
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Team:
    """Category, text and voice channel created for one jam game."""

    game_name: str
    category_id: int
    text_id: int
    voice_id: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        """Create Team from a stored dict."""
        return cls(
            game_name=data.get("game_name", ""),
            category_id=int(data.get("category_id", 0)),
            text_id=int(data.get("text_id", 0)),
            voice_id=int(data.get("voice_id", 0)),
        )
