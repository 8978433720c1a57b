# Nodes router — execute a node, fetch its AI input schema.
# Created: 2026-03-02

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from remindersflow.api.deps import get_client
from remindersflow.api.v1.schemas.nodes import NodeExecuteRequest, NodeExecuteResponse
from remindersflow.config import get_settings
from remindersflow.errors import (
    InvalidFieldError,
    MissingRequiredFieldError,
    RemoteRequestError,
    UnknownOperationError,
)
from remindersflow.nodes import BaseNode, get_node_class
from remindersflow.resolver import StaticNodeParameters

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Nodes"])


def _node_class(node_name: str) -> type[BaseNode]:
    node_cls = get_node_class(node_name)
    if node_cls is None:
        raise HTTPException(status_code=404, detail=f"Unknown node: {node_name}")
    return node_cls


@router.post("/nodes/{node_name}/execute", response_model=NodeExecuteResponse)
async def execute_node(node_name: str, body: NodeExecuteRequest, client=Depends(get_client)):
    """Run a node over the submitted items."""
    node_cls = _node_class(node_name)
    continue_on_fail = body.continue_on_fail
    if continue_on_fail is None:
        continue_on_fail = get_settings().continue_on_fail

    node = node_cls(client, StaticNodeParameters(body.parameters), continue_on_fail)
    try:
        results = await node.execute(body.items)
    except (MissingRequiredFieldError, InvalidFieldError, UnknownOperationError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except RemoteRequestError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return {"items": [item.to_dict() for item in results]}


@router.get("/nodes/{node_name}/schema")
async def node_schema(node_name: str) -> dict[str, Any]:
    """Input schema an AI agent fills in to call this node."""
    return _node_class(node_name).tool_schema()
