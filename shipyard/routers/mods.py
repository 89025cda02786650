"""Mods router: install, list, toggle and remove content packs."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shipyard.database import get_db
from shipyard.schemas.mod import ModCreate, ModResponse, ModUpdate
from shipyard.services.mod_service import (
    ModConflictError,
    create_mod,
    delete_mod,
    get_mod,
    list_mods,
    update_mod,
)

router = APIRouter(prefix="/mods", tags=["mods"])


@router.get("", response_model=list[ModResponse])
async def list_all_mods(db: AsyncSession = Depends(get_db)):
    return await list_mods(db)


@router.post("", response_model=ModResponse, status_code=status.HTTP_201_CREATED)
async def install_mod(body: ModCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_mod(
            db,
            name=body.name,
            author=body.author,
            version=body.version,
            description=body.description,
            enabled=body.enabled,
            priority=body.priority,
            files=body.files,
            file_modes=body.file_modes,
            renames=body.renames,
        )
    except ModConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{mod_id}", response_model=ModResponse)
async def get_single_mod(mod_id: int, db: AsyncSession = Depends(get_db)):
    mod = await get_mod(db, mod_id)
    if mod is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mod not found")
    return mod


@router.patch("/{mod_id}", response_model=ModResponse)
async def patch_mod(mod_id: int, body: ModUpdate, db: AsyncSession = Depends(get_db)):
    mod = await get_mod(db, mod_id)
    if mod is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mod not found")
    try:
        return await update_mod(db, mod, enabled=body.enabled, priority=body.priority)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{mod_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_mod(mod_id: int, db: AsyncSession = Depends(get_db)):
    mod = await get_mod(db, mod_id)
    if mod is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mod not found")
    await delete_mod(db, mod)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
