"""Per-user todo CRUD endpoints."""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request

from todo_service.core.dependencies import get_todo_store
from todo_service.core.errors import TodoNotFoundError, TodoValidationError, UserNotFoundError
from todo_service.services.todo_store import TodoStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/{user}/todos", tags=["todos"])

StoreDep = Annotated[TodoStore, Depends(get_todo_store)]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


async def _read_json_body(request: Request) -> Any:
    body = await request.body()
    try:
        # NaN/Infinity are not JSON
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise HTTPException(400, "Failed to parse JSON") from e


@router.get("")
async def list_todos(user: str, store: StoreDep) -> list[dict[str, Any]]:
    """List a user's todos in creation order."""
    try:
        todos = store.list_todos(user)
    except UserNotFoundError as e:
        raise HTTPException(404, str(e)) from e
    return [todo.to_json() for todo in todos]


@router.get("/{todo_id}")
async def get_todo(user: str, todo_id: str, store: StoreDep) -> dict[str, Any]:
    try:
        return store.get_todo(user, todo_id).to_json()
    except TodoNotFoundError as e:
        raise HTTPException(404, str(e)) from e


@router.post("", status_code=201)
async def create_todo(user: str, request: Request, store: StoreDep) -> dict[str, Any]:
    """Create a todo. The user is created on its first todo."""
    body = await _read_json_body(request)
    try:
        todo = store.create_todo(user, body)
    except TodoValidationError as e:
        logger.debug("Rejected create for user %s: %s", user, e)
        raise HTTPException(400, str(e)) from e
    return {"message": "Todo created", "todo": todo.to_json()}


@router.put("/{todo_id}")
async def update_todo(user: str, todo_id: str, request: Request, store: StoreDep) -> dict[str, Any]:
    """Update title and/or status of an existing todo."""
    body = await _read_json_body(request)
    try:
        todo = store.update_todo(user, todo_id, body)
    except TodoNotFoundError as e:
        raise HTTPException(404, str(e)) from e
    except TodoValidationError as e:
        logger.debug("Rejected update of %s for user %s: %s", todo_id, user, e)
        raise HTTPException(400, str(e)) from e
    return {"message": "Todo updated", "todo": todo.to_json()}


@router.delete("/{todo_id}")
async def delete_todo(user: str, todo_id: str, store: StoreDep) -> dict[str, Any]:
    try:
        store.delete_todo(user, todo_id)
    except TodoNotFoundError as e:
        raise HTTPException(404, str(e)) from e
    return {"message": "Todo deleted successfully"}


@router.delete("")
async def delete_all_todos(user: str, store: StoreDep) -> dict[str, Any]:
    """Empty a user's todo list. The user itself is kept."""
    try:
        store.delete_all_todos(user)
    except UserNotFoundError as e:
        raise HTTPException(404, str(e)) from e
    return {"message": "All todos deleted successfully"}
