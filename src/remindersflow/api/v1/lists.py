# Lists router — list search for interactive selection.
# Created: 2026-03-02

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from remindersflow.api.deps import get_client
from remindersflow.api.v1.schemas.nodes import ListSearchResponse
from remindersflow.lookups import search_lists

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Lists"])


@router.get("/lists/search", response_model=ListSearchResponse)
async def list_search(filter: str | None = Query(None), client=Depends(get_client)):
    """Lists whose name contains ``filter``; empty when the server is unreachable."""
    return {"results": await search_lists(client, filter)}
