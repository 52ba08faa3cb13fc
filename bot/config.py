"""Configuration management for the Game Jam Bot."""
import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Bot configuration loaded from environment variables."""

    # Discord
    discord_token: str = field(default_factory=lambda: os.getenv("DISCORD_TOKEN", ""))

    # Roles
    organizer_role: str = field(default_factory=lambda: os.getenv("ORGANIZER_ROLE", "Organizer"))
    jammer_role: str = field(default_factory=lambda: os.getenv("JAMMER_ROLE", "Jammer"))

    # Persistence
    state_file: str = field(default_factory=lambda: os.getenv("STATE_FILE", "state.json"))

    # Health check
    health_port: int = field(default_factory=lambda: int(os.getenv("HEALTH_PORT", "8080")))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def __post_init__(self) -> None:
        """Normalise role names after initialization."""
        self.organizer_role = self.organizer_role.strip()
        self.jammer_role = self.jammer_role.strip()

    def validate(self) -> list[str]:
        """Validate required configuration. Returns list of errors."""
        errors = []
        if not self.discord_token:
            errors.append("DISCORD_TOKEN is required")
        if not self.organizer_role:
            errors.append("ORGANIZER_ROLE must not be empty")
        if not self.jammer_role:
            errors.append("JAMMER_ROLE must not be empty")
        if not self.state_file:
            errors.append("STATE_FILE must not be empty")
        return errors
