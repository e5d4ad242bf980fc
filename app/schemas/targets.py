"""
app/schemas/targets.py

Schemas for monthly target upserts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from db.base import INT_COLUMN_MAX, INT_COLUMN_MIN
from db.repositories.types import MAX_YEAR, TargetValues


class TargetUpsertRequest(BaseModel):
    """
    Quotas for one month. Omitted figures are stored as 0; negative values
    are accepted as-is.
    """

    year: int = Field(..., ge=1, le=MAX_YEAR)
    month: int = Field(..., ge=1, le=12)
    sales_target_yearly: float = Field(default=0, allow_inf_nan=False)
    sales_target_monthly: float = Field(default=0, allow_inf_nan=False)
    call_target_monthly: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    email_target_monthly: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    whatsapp_target_monthly: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    social_target_monthly: int = Field(default=0, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)

    def to_values(self) -> TargetValues:
        return TargetValues(
            sales_target_yearly=self.sales_target_yearly,
            sales_target_monthly=self.sales_target_monthly,
            call_target_monthly=self.call_target_monthly,
            email_target_monthly=self.email_target_monthly,
            whatsapp_target_monthly=self.whatsapp_target_monthly,
            social_target_monthly=self.social_target_monthly,
        )


class TargetCreateRequest(TargetUpsertRequest):
    user_id: int = Field(..., ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)


class TargetResponse(BaseModel):
    id: int
    user_id: int
    year: int
    month: int
    sales_target_yearly: float
    sales_target_monthly: float
    call_target_monthly: int
    email_target_monthly: int
    whatsapp_target_monthly: int
    social_target_monthly: int

    model_config = {"from_attributes": True}
