# Node execution schemas.
# Created: 2026-03-02

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeExecuteRequest(BaseModel):
    """Run a node over a batch of input items."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[dict[str, Any]] = Field(default_factory=lambda: [{}])
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Node configuration (the host-configured fields)"
    )
    continue_on_fail: bool | None = Field(None, alias="continueOnFail")


class PairedItem(BaseModel):
    item: int


class NodeOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_: dict[str, Any] = Field(alias="json")
    pairedItem: PairedItem


class NodeExecuteResponse(BaseModel):
    items: list[NodeOutput]


class ListSearchResult(BaseModel):
    name: str
    value: str
    url: str


class ListSearchResponse(BaseModel):
    results: list[ListSearchResult]
