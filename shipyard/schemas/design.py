"""Pydantic schemas for the design load / upgrade endpoints.

Design documents are camelCase JSON, so these responses are serialised
with camelCase aliases as well.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DesignLoadRequest(BaseModel):
    document: str


class DesignSummaryResponse(CamelModel):
    name: str
    hull_id: str
    design_type: str
    hull_points_available: int
    hull_points_used: int
    hull_points_remaining: int
    power_generated: int
    power_consumed: int
    power_balance: int
    total_cost: int


class LoadResponse(CamelModel):
    success: bool
    warnings: list[str] = []
    error_kind: Optional[str] = None
    message: Optional[str] = None
    summary: Optional[DesignSummaryResponse] = None
    # The loaded design re-serialised at the current schema version
    document: Optional[str] = None


class UpgradeResponse(CamelModel):
    document: str
    warnings: list[str] = []
