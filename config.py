"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _default_log_level() -> str:
    if os.getenv("DEBUG", "false").lower() == "true":
        return "DEBUG"
    return os.getenv("LOG_LEVEL", "WARNING").upper()


@dataclass(frozen=True)
class GameConfig:
    """Table rules for a round."""

    blackjack_total: int = 21
    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS_ON", "18"))
    )
    seed: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_SEED"))

    def __post_init__(self) -> None:
        """Validate the rules."""
        if not 2 <= self.dealer_stands_on <= self.blackjack_total:
            raise ValueError(
                f"dealer_stands_on must be between 2 and {self.blackjack_total}"
            )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=_default_log_level)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
