"""Pydantic schemas for the mod endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class ModCreate(BaseModel):
    name: str
    author: str = ""
    version: str = "1.0.0"
    description: str = ""
    enabled: bool = True
    priority: int = 0
    files: dict[str, list[dict[str, Any]]] = {}
    file_modes: dict[str, str] = {}
    renames: dict[str, dict[str, str]] = {}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v


class ModUpdate(BaseModel):
    enabled: Optional[bool] = None
    priority: Optional[int] = None


class ModResponse(BaseModel):
    id: int
    name: str
    author: str
    version: str
    description: str
    enabled: bool
    priority: int
    files: dict[str, list[dict[str, Any]]]
    file_modes: dict[str, str]
    renames: dict[str, dict[str, str]]
    created_at: datetime

    model_config = {"from_attributes": True}
