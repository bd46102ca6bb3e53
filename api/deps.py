"""
FastAPI dependency providers.

Provides the application config as a singleton so the environment is
read once, and overridable in tests via ``app.dependency_overrides``.
"""

from dotenv import load_dotenv

from core.config import AppConfig

_config: AppConfig | None = None


def get_config() -> AppConfig:
    """
    Return a cached ``AppConfig`` singleton.

    Loads a ``.env`` file (if present) and reads ``CHORD_MAKER_*``
    variables on first call; the result is reused thereafter.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        load_dotenv()
        _config = AppConfig.from_env()
    return _config
