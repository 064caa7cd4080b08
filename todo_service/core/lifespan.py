"""Application lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown."""
    port = getattr(app.state, "port", None)
    if port is not None:
        logger.info("Server is running on port %s", port)
    try:
        yield
    finally:
        # State is memory-only; an injected store belongs to the caller.
        store = app.state.todo_store
        if getattr(app.state, "owns_todo_store", False):
            logger.info("Discarding todo store (%d users)", len(store))
            store.clear()
