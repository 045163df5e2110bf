#!/usr/bin/env python3
"""
Content Scoring API Server — entrypoint for `python -m server.server`.

For uvicorn server:app use server/__init__.py (exposes app from server.app).
"""

import uvicorn

from .app import app
from .config import get_config

if __name__ == "__main__":
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
