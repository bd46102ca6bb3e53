"""
Configuration dataclass for the chord-maker surfaces (CLI and API).

The theory engine itself takes no configuration; this immutable object
carries the settings the outer layers need, so they can be built once
from the environment and passed around.
"""

import os
from dataclasses import dataclass

# Allowlist of logging level names accepted from the environment.
VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    }
)


@dataclass(frozen=True)
class AppConfig:
    """
    Settings for the command line and HTTP API.

    Attributes:
        log_level: Name of the root logging level. Defaults to "WARNING"
            so the CLI prints only its results.
        api_title: Title shown in the generated OpenAPI docs.
        cors_origins: Origins allowed to call the API from a browser.

    Example:
        >>> config = AppConfig(log_level="DEBUG")
        >>> config.log_level
        'DEBUG'
    """

    log_level: str = "WARNING"
    api_title: str = "Chord Maker"
    cors_origins: tuple[str, ...] = (
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    )

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log_level {self.log_level!r}, "
                f"valid options: {sorted(VALID_LOG_LEVELS)}"
            )
        if not self.api_title:
            raise ValueError("api_title must not be empty")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Build a config from ``CHORD_MAKER_*`` environment variables.

        Unset variables fall back to the dataclass defaults. Call
        ``dotenv.load_dotenv()`` first to pick up a ``.env`` file.
        """
        kwargs: dict[str, object] = {}
        log_level = os.getenv("CHORD_MAKER_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.strip().upper()
        api_title = os.getenv("CHORD_MAKER_API_TITLE")
        if api_title:
            kwargs["api_title"] = api_title.strip()
        origins = os.getenv("CHORD_MAKER_CORS_ORIGINS")
        if origins:
            kwargs["cors_origins"] = tuple(o.strip() for o in origins.split(",") if o.strip())
        return cls(**kwargs)
