"""
app/schemas/kpis.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class KPICreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class KPIResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool

    model_config = {"from_attributes": True}
