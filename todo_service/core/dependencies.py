"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, FastAPI, Request

from todo_service.services.todo_store import TodoStore


async def get_app(request: Request) -> FastAPI:
    """Get FastAPI app instance from request."""
    return request.app


async def get_todo_store(app: Annotated[FastAPI, Depends(get_app)]) -> TodoStore:
    """Get the todo store owned by the app."""
    return app.state.todo_store
