"""Pipeline entry points: load a saved design, save a design.

  raw text -> parse -> version gate -> migrations -> resolve -> recompute

Fatal errors (parse, version, missing hull) short-circuit the pipeline and
come back as a failed LoadResult; everything else is a warning.
"""

from __future__ import annotations

import logging

from shipyard.services.catalog import Catalog
from shipyard.services.design_state import DesignState
from shipyard.services.document_parser import parse
from shipyard.services.migrations import MigrationChain
from shipyard.services.recalculator import recompute
from shipyard.services.report import DesignLoadError, LoadResult
from shipyard.services.resolver import resolve
from shipyard.services.serializer import serialize
from shipyard.services.version_gate import check

logger = logging.getLogger(__name__)


def load(raw: str | bytes, catalog: Catalog | None = None) -> LoadResult:
    if catalog is None:
        catalog = Catalog.builtin()
    try:
        doc = parse(raw)
        version = check(doc)
        migrated = MigrationChain.for_catalog(catalog).apply(doc)
        partial, report = resolve(migrated, catalog)
        state, report = recompute(partial, report)
    except DesignLoadError as exc:
        logger.warning("Design load failed (%s): %s", exc.error_kind, exc.message)
        return LoadResult.failed(exc.error_kind, exc.message)

    logger.debug(
        "Loaded design %r (schema %s) with %d warning(s)", state.name, version, len(report)
    )
    return LoadResult.ok(state, report.warnings)


def save(state: DesignState) -> str:
    return serialize(state)
