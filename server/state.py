"""Application state: configuration and the content store."""

import logging
from typing import Optional

from .config import ServerConfig, get_config
from .services import ContentStore, JsonContentStore

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, content_store: Optional[ContentStore] = None):
        self.config = config
        self._content_store = content_store

    @property
    def content_store(self) -> ContentStore:
        """Content store, loaded from config.content_json_path on first use."""
        if self._content_store is None:
            logger.info("[startup] Content store: JSON (%s)", self.config.content_json_path)
            self._content_store = JsonContentStore(self.config.content_json_path)
        return self._content_store

    @property
    def is_loaded(self) -> bool:
        return self._content_store is not None


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state
