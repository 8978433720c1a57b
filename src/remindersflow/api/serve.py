"""Local API server for ``remindersflow serve``.

Mounts the versioned ``/api/v1/`` routers so other tools can run the
Reminders nodes over HTTP.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def create_api_app():
    """Build the FastAPI application with the v1 routers."""
    from fastapi import FastAPI, Request
    from fastapi.responses import JSONResponse

    from remindersflow import __version__
    from remindersflow.api.v1 import mount_v1_routers
    from remindersflow.errors import RemindersError

    app = FastAPI(
        title="Reminders Nodes API",
        description="Run Reminders workflow nodes against a Reminders API server.",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )

    @app.exception_handler(RemindersError)
    async def _reminders_error(request: Request, exc: RemindersError):
        logger.warning("Unhandled %s on %s: %s", type(exc).__name__, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    mount_v1_routers(app)
    return app


def run_api_server(host: str = "127.0.0.1", port: int = 8890, dev: bool = False) -> None:
    """Start the API server under uvicorn."""
    import uvicorn

    print(f"\nAPI docs: http://{host}:{port}/api/v1/docs\n")

    if dev:
        uvicorn.run(
            "remindersflow.api.serve:create_api_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level="debug",
        )
    else:
        uvicorn.run(create_api_app(), host=host, port=port)
