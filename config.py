"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Round rules."""

    dealer_stand_threshold: int = field(
        default_factory=lambda: int(os.getenv("DEALER_STAND_THRESHOLD", "17"))
    )
    resolve_rounds: bool = field(
        default_factory=lambda: os.getenv("RESOLVE_ROUNDS", "true").lower() == "true"
    )
    initial_hand_size: int = 2
    dealer_name: str = "Dealer"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Apply the logging configuration to the root logger."""
    app_config = app_config or config
    level = logging.DEBUG if app_config.debug else app_config.log.level
    logging.basicConfig(format=app_config.log.format, level=level)


# Global configuration instance
config = AppConfig()
