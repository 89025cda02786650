"""Load errors and the warning accumulator threaded through the pipeline.

Fatal problems are raised as DesignLoadError subclasses and turned into a
failed LoadResult once, at the pipeline entry point.  Recoverable problems
are recorded on a MigrationReport and never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shipyard.data.categories import CatalogCategory, category_label

if TYPE_CHECKING:
    from shipyard.services.design_state import DesignState

DOCUMENT_LABEL = "document"


class DesignLoadError(Exception):
    error_kind = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(DesignLoadError):
    """The file could not be read as a design document."""
    error_kind = "parse"


class VersionError(DesignLoadError):
    """The file was saved by a newer, incompatible version of the application."""
    error_kind = "version"


class MissingHullError(DesignLoadError):
    """The design has no hull, or its hull is not in the catalog."""
    error_kind = "missing-hull"


class MigrationReport:
    """Ordered mapping of category label -> warning messages."""

    def __init__(self) -> None:
        self._entries: dict[str, list[str]] = {}

    def warn(self, label: str | CatalogCategory, message: str) -> None:
        if isinstance(label, CatalogCategory):
            label = category_label(label)
        self._entries.setdefault(label, []).append(message)

    def warn_missing(self, category: CatalogCategory, type_id: object) -> None:
        self.warn(category, f"could not find type '{type_id}', entry removed")

    def by_category(self) -> dict[str, list[str]]:
        return {label: list(messages) for label, messages in self._entries.items()}

    @property
    def warnings(self) -> list[str]:
        return [
            f"{label}: {message}"
            for label, messages in self._entries.items()
            for message in messages
        ]

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._entries.values())


@dataclass
class LoadResult:
    success: bool
    state: DesignState | None = None
    warnings: list[str] = field(default_factory=list)
    error_kind: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, state: DesignState, warnings: list[str]) -> LoadResult:
        return cls(success=True, state=state, warnings=list(warnings))

    @classmethod
    def failed(cls, error_kind: str, message: str) -> LoadResult:
        return cls(success=False, error_kind=error_kind, message=message)
