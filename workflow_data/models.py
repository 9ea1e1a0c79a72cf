from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class DatasetSummary(BaseModel):
    documents: int = 0
    properties: List[str] = Field(default_factory=list)
    example: Optional[Dict[str, Any]] = Field(default=None, examples=[None])


class RowsResponse(BaseModel):
    rows: List[Dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
