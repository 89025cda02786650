"""Mod service: persisted content packs and catalog construction.

Responsibilities:
  - CRUD for Mod rows
  - Reject duplicate names and rename tables that would form a cycle
  - Build the request catalog: built-in entries overlaid by every enabled
    mod in ascending priority
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shipyard.data.renames import BUILTIN_RENAMES, collapse_renames
from shipyard.models.mod import Mod
from shipyard.services.catalog import FILE_MODES, Catalog, ModOverlay, parse_category

logger = logging.getLogger(__name__)


class ModConflictError(ValueError):
    """A mod with the same name already exists."""


def to_overlay(mod: Mod) -> ModOverlay:
    return ModOverlay(
        name=mod.name,
        version=mod.version,
        priority=mod.priority,
        files=dict(mod.files or {}),
        file_modes=dict(mod.file_modes or {}),
        renames=dict(mod.renames or {}),
    )


def validate_mod_content(
    files: dict, file_modes: dict, renames: dict, other_renames: list[dict] | None = None
) -> None:
    """Raise ValueError for content that can never load.

    Individual malformed entries are tolerated here; the catalog skips them
    when it is built.
    """
    for key, entries in files.items():
        parse_category(key)
        if not isinstance(entries, list):
            raise ValueError(f"Entries for '{key}' must be a list")
    for key, mode in file_modes.items():
        parse_category(key)
        if mode not in FILE_MODES:
            raise ValueError(f"File mode for '{key}' must be one of {', '.join(FILE_MODES)}")

    combined = {category: dict(table) for category, table in BUILTIN_RENAMES.items()}
    for tables in [*(other_renames or []), renames]:
        for key, table in tables.items():
            combined.setdefault(parse_category(key), {}).update(table)
    for table in combined.values():
        collapse_renames(table)


async def list_mods(db: AsyncSession, enabled_only: bool = False) -> list[Mod]:
    query = select(Mod).order_by(Mod.priority, Mod.id)
    if enabled_only:
        query = query.where(Mod.enabled.is_(True))
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_mod(db: AsyncSession, mod_id: int) -> Mod | None:
    result = await db.execute(select(Mod).where(Mod.id == mod_id))
    return result.scalar_one_or_none()


async def get_mod_by_name(db: AsyncSession, name: str) -> Mod | None:
    result = await db.execute(select(Mod).where(Mod.name == name))
    return result.scalar_one_or_none()


async def create_mod(
    db: AsyncSession,
    name: str,
    author: str = "",
    version: str = "1.0.0",
    description: str = "",
    enabled: bool = True,
    priority: int = 0,
    files: dict | None = None,
    file_modes: dict | None = None,
    renames: dict | None = None,
) -> Mod:
    if await get_mod_by_name(db, name) is not None:
        raise ModConflictError(f"A mod named '{name}' already exists")

    files = files or {}
    file_modes = file_modes or {}
    renames = renames or {}
    existing = await list_mods(db, enabled_only=True)
    validate_mod_content(files, file_modes, renames, [m.renames or {} for m in existing])

    mod = Mod(
        name=name,
        author=author,
        version=version,
        description=description,
        enabled=enabled,
        priority=priority,
        files=files,
        file_modes=file_modes,
        renames=renames,
    )
    db.add(mod)
    await db.commit()
    await db.refresh(mod)
    logger.info("Installed mod %s %s (priority %d)", name, version, priority)
    return mod


async def update_mod(
    db: AsyncSession, mod: Mod, enabled: bool | None = None, priority: int | None = None
) -> Mod:
    if enabled and not mod.enabled:
        others = [m for m in await list_mods(db, enabled_only=True) if m.id != mod.id]
        validate_mod_content(
            mod.files or {}, mod.file_modes or {}, mod.renames or {}, [m.renames or {} for m in others]
        )
    if enabled is not None:
        mod.enabled = enabled
    if priority is not None:
        mod.priority = priority
    await db.commit()
    await db.refresh(mod)
    return mod


async def delete_mod(db: AsyncSession, mod: Mod) -> None:
    await db.delete(mod)
    await db.commit()
    logger.info("Removed mod %s", mod.name)


async def build_catalog(db: AsyncSession) -> Catalog:
    """Built-in catalog overlaid by every enabled mod."""
    mods = await list_mods(db, enabled_only=True)
    catalog = Catalog.builtin()
    if not mods:
        return catalog
    return catalog.with_overlays(to_overlay(mod) for mod in mods)
