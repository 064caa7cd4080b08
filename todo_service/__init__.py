"""In-memory per-user todo list service."""
