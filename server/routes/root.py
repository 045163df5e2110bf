"""Root and health endpoints."""

import logging

from fastapi import APIRouter, Depends

from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


def _content_counts(state: AppState) -> dict:
    """Blog/podcast counts, or an error message if the store cannot be loaded."""
    try:
        store = state.content_store
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Content store unavailable: %s", e)
        return {"available": False, "message": str(e)}
    return {
        "available": True,
        "blog_posts": len(store.get_blog_posts()),
        "podcast_episodes": len(store.get_podcast_episodes()),
    }


@router.get("/")
def root(state: AppState = Depends(get_state)):
    return {
        "name": "Content Scoring API",
        "version": "1.0.0",
        "status": "loaded" if state.is_loaded else "not_loaded",
        "endpoints": {
            "search": ["/api/search"],
            "recommendations": [
                "/api/recommendations/{content_id}",
                "/api/trending",
                "/api/related/{post_id}",
            ],
        },
    }


@router.get("/api/health")
def health(state: AppState = Depends(get_state)):
    content = _content_counts(state)
    return {
        "status": "healthy" if content["available"] else "degraded",
        "content": content,
    }
