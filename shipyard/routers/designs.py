"""Designs router: load, validate and upgrade saved design documents."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from shipyard.database import get_db
from shipyard.schemas.design import (
    DesignLoadRequest,
    DesignSummaryResponse,
    LoadResponse,
    UpgradeResponse,
)
from shipyard.services.design_loader import load, save
from shipyard.services.design_state import DesignState
from shipyard.services.design_summary import summarize
from shipyard.services.mod_service import build_catalog

router = APIRouter(prefix="/designs", tags=["designs"])


def _summary_response(state: DesignState) -> DesignSummaryResponse:
    summary = summarize(state)
    return DesignSummaryResponse(
        name=state.name,
        hull_id=state.hull.id,
        design_type=state.design_type.value,
        hull_points_available=summary.hull_points_available,
        hull_points_used=summary.hull_points_used,
        hull_points_remaining=summary.hull_points_remaining,
        power_generated=summary.power_generated,
        power_consumed=summary.power_consumed,
        power_balance=summary.power_balance,
        total_cost=summary.total_cost,
    )


@router.post("/load", response_model=LoadResponse)
async def load_design(body: DesignLoadRequest, db: AsyncSession = Depends(get_db)):
    """Run the full load pipeline against the current catalog (built-ins + enabled mods).

    Fatal problems are reported in the body with success=false, not as an
    HTTP error, so the caller can show the reason to the user.
    """
    catalog = await build_catalog(db)
    result = load(body.document, catalog)
    if not result.success:
        return LoadResponse(success=False, error_kind=result.error_kind, message=result.message)
    return LoadResponse(
        success=True,
        warnings=result.warnings,
        summary=_summary_response(result.state),
        document=save(result.state),
    )


@router.post("/upgrade", response_model=UpgradeResponse)
async def upgrade_design(body: DesignLoadRequest, db: AsyncSession = Depends(get_db)):
    """Return the document rewritten at the current schema version."""
    catalog = await build_catalog(db)
    result = load(body.document, catalog)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errorKind": result.error_kind, "message": result.message},
        )
    return UpgradeResponse(document=save(result.state), warnings=result.warnings)
