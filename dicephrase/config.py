"""
Configuration loaded from environment variables
Only defaults are configurable; the command line always wins
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from dicephrase.schemas import EmbeddedList


def _find_env_file() -> str:
    """Find .env file in the current directory or the project root"""
    if Path(".env").exists():
        return ".env"
    project_env = Path(__file__).parent.parent / ".env"
    if project_env.exists():
        return str(project_env)
    return ".env"


class Settings(BaseSettings):
    """Settings from DICEPHRASE_* environment variables"""

    # Word list used when the caller does not pick one
    DEFAULT_LIST: EmbeddedList = EmbeddedList.EN

    # Diagnostics go to stderr at this level
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_prefix = "DICEPHRASE_"
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings, reporting every problem at once."""
    errors = []

    level = active_settings.LOG_LEVEL
    if not isinstance(level, str) or level.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
