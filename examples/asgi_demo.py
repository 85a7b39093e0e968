"""Sample ASGI application with the rekey middleware.

Requests posting ``{"user_id": ...}`` reach the application as
``{"userId": ...}``.

Run with:
    uvicorn examples.asgi_demo:app --reload

Then:
    curl -X POST localhost:8000/users -H 'Content-Type: application/json' \\
        -d '{"user_id": 42, "name": "alice"}'
"""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from rekey.integration.asgi import ASGIMiddleware
from rekey.logging import configure_logging


async def create_user(request: Request) -> JSONResponse:
    """Echo the body the application actually received."""
    data = await request.json()
    return JSONResponse({
        "received": data,
        "content_length": request.headers.get("content-length"),
    })


routes = [
    Route("/users", create_user, methods=["POST"]),
]

config = {
    "name": "user-id-camelcase",
    "rename": {"oldKey": "user_id", "newKey": "userId"},
    "logging": {"level": "DEBUG"},
}

app = ASGIMiddleware(Starlette(routes=routes), config_dict=config)

# Alternative: load from a YAML file
# app = ASGIMiddleware(Starlette(routes=routes), config_file="rekey.yaml")

if __name__ == "__main__":
    import uvicorn

    configure_logging(app.config.logging)
    uvicorn.run(app, host="127.0.0.1", port=8000)
