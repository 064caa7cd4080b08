"""Todo Service - FastAPI Application."""

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_service.core import config
from todo_service.core.lifespan import lifespan
from todo_service.core.pretty_json import pretty_json_middleware
from todo_service.routers import todos
from todo_service.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Internal Server Error"}, status_code=500)


def create_app(store: TodoStore | None = None, port: int | None = None) -> FastAPI:
    """Build the app around ``store`` (a fresh empty store by default)."""
    app = FastAPI(title="Todo Service", lifespan=lifespan)
    app.state.todo_store = store if store is not None else TodoStore()
    app.state.owns_todo_store = store is None
    app.state.port = port

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(pretty_json_middleware)

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    app.include_router(todos.router)
    return app


def _resolve_port() -> int:
    """Resolve listening port: TODO_PORT > PORT > default 3000."""
    port = os.environ.get("TODO_PORT") or os.environ.get("PORT")
    if port:
        return int(port)
    return config.DEFAULT_PORT


def run() -> None:
    port = _resolve_port()
    logging.basicConfig(level=config.LOG_LEVEL.upper())
    if config.RELOAD:
        # reload needs an import string; the factory then runs inside the worker
        uvicorn.run(
            "todo_service.main:create_app",
            factory=True,
            host=config.HOST,
            port=port,
            reload=True,
            log_level=config.LOG_LEVEL,
        )
    else:
        uvicorn.run(create_app(port=port), host=config.HOST, port=port, log_level=config.LOG_LEVEL)


if __name__ == "__main__":
    run()
