# API v1 router aggregation.
# Created: 2026-03-02

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

_V1_ROUTERS: list[tuple[str, str, str]] = [
    # (module_path, attr_name, tag)
    ("remindersflow.api.v1.nodes", "router", "Nodes"),
    ("remindersflow.api.v1.lists", "router", "Lists"),
]


def mount_v1_routers(app: FastAPI) -> None:
    """Mount all v1 routers on *app* at ``/api/v1``."""
    import importlib

    for module_path, attr_name, tag in _V1_ROUTERS:
        mod = importlib.import_module(module_path)
        app.include_router(getattr(mod, attr_name), prefix="/api/v1")
        logger.debug("Mounted v1 router: %s (%s)", module_path, tag)
