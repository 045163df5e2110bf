"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# Single .env at the project root
load_dotenv(BASE_DIR / ".env")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Content store: JSON file with "blogPosts" and "podcastEpisodes" lists
    content_json_path: Path = BASE_DIR / "datasets" / "sample_content.json"

    # Search endpoint
    search_default_limit: int = 10
    search_max_limit: int = 50
    search_cache_control: str = "public, s-maxage=60, stale-while-revalidate=120"

    # Recommendation / trending rails
    trending_default_limit: int = 6
    related_default_limit: int = 3

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""

        def _path_env(key: str, default: Path) -> Path:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            content_json_path=_path_env("CONTENT_JSON_PATH", cls.content_json_path),
            search_default_limit=int(os.getenv("SEARCH_DEFAULT_LIMIT", "10")),
            search_max_limit=int(os.getenv("SEARCH_MAX_LIMIT", "50")),
            search_cache_control=os.getenv("SEARCH_CACHE_CONTROL", cls.search_cache_control),
            trending_default_limit=int(os.getenv("TRENDING_DEFAULT_LIMIT", "6")),
            related_default_limit=int(os.getenv("RELATED_DEFAULT_LIMIT", "3")),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.content_json_path.exists():
            errors.append(f"Content JSON not found: {self.content_json_path}")

        if self.search_max_limit < 1:
            errors.append(f"SEARCH_MAX_LIMIT must be positive, got {self.search_max_limit}")

        if not 1 <= self.search_default_limit <= max(self.search_max_limit, 1):
            errors.append(
                f"SEARCH_DEFAULT_LIMIT must be between 1 and {self.search_max_limit}, "
                f"got {self.search_default_limit}"
            )

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
