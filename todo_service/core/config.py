"""Configuration constants for the todo service."""

import os

# Server
DEFAULT_PORT = 3000
HOST = os.environ.get("TODO_HOST", "0.0.0.0")
LOG_LEVEL = os.environ.get("TODO_LOG_LEVEL", "info").lower()
RELOAD = os.environ.get("TODO_RELOAD", "").lower() in ("1", "true", "yes")

# Todo fields
DEFAULT_STATUS = "todo"
TITLE_MAX_LENGTH = 100
STATUS_MAX_LENGTH = 50
ALLOWED_BODY_KEYS = frozenset({"title", "status"})
