"""Pydantic schemas for the catalog endpoints."""

from typing import Any

from pydantic import BaseModel


class CatalogCategoryInfo(BaseModel):
    category: str
    label: str
    count: int


class CatalogEntriesResponse(BaseModel):
    category: str
    label: str
    entries: list[dict[str, Any]]
