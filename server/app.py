"""
Content Scoring API — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and warm the content store."""
    state = get_state()
    is_valid, errors = state.config.validate()
    for error in errors:
        logger.warning("[startup] %s", error)
    if is_valid:
        store = state.content_store
        logger.info(
            "[startup] Content loaded: %d blog posts, %d podcast episodes",
            len(store.get_blog_posts()), len(store.get_podcast_episodes()),
        )
    yield


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, logging, and routes."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Content Scoring API",
        description="Search, recommendations, and trending over blog and podcast content",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()
