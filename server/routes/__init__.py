"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .recommendations import router as recommendations_router
from .root import router as root_router
from .search import router as search_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(search_router, prefix="/api", tags=["search"])
    app.include_router(recommendations_router, prefix="/api", tags=["recommendations"])
