"""Catalog router: browse the merged catalog (built-ins + enabled mods)."""

import dataclasses

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from shipyard.data.categories import CatalogCategory, category_label
from shipyard.database import get_db
from shipyard.schemas.catalog import CatalogCategoryInfo, CatalogEntriesResponse
from shipyard.services.catalog import parse_category
from shipyard.services.mod_service import build_catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=list[CatalogCategoryInfo])
async def list_categories(db: AsyncSession = Depends(get_db)):
    catalog = await build_catalog(db)
    return [
        CatalogCategoryInfo(
            category=category.value,
            label=category_label(category),
            count=len(catalog.get_all(category)),
        )
        for category in CatalogCategory
    ]


@router.get("/{category}", response_model=CatalogEntriesResponse)
async def list_entries(category: str, db: AsyncSession = Depends(get_db)):
    try:
        parsed = parse_category(category)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown catalog category")

    catalog = await build_catalog(db)
    return CatalogEntriesResponse(
        category=parsed.value,
        label=category_label(parsed),
        entries=[dataclasses.asdict(entry) for entry in catalog.get_all(parsed)],
    )
