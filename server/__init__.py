"""
Content Scoring API Server

Usage: uvicorn server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import ContentStore, InMemoryContentStore, JsonContentStore
from .state import AppState, get_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "ContentStore",
    "InMemoryContentStore",
    "JsonContentStore",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
]
