"""Pretty-print JSON responses when the request carries a ``pretty`` query parameter."""

import json
from collections.abc import Awaitable, Callable

from fastapi import Request, Response


async def pretty_json_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    response = await call_next(request)
    if "pretty" not in request.query_params:
        return response
    if not response.headers.get("content-type", "").startswith("application/json"):
        return response

    body = b"".join([chunk async for chunk in response.body_iterator])
    content = json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    headers = {k: v for k, v in response.headers.items() if k.lower() not in ("content-length", "content-type")}
    return Response(
        content=content,
        status_code=response.status_code,
        headers=headers,
        media_type="application/json",
    )
