"""Mod model: a user-authored content pack overlaying the built-in catalog."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from shipyard.models.base import Base


class Mod(Base):
    """One installed mod.

    `files` maps a catalog category (e.g. "weapon") to a list of raw entry
    dicts.  `file_modes` maps the same categories to "add" (merge by id) or
    "replace" (discard the built-in entries of that category).  `renames`
    maps a category to an {old_id: new_id} table applied on load.
    """

    __tablename__ = "mods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    author: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    version: Mapped[str] = mapped_column(String(32), nullable=False, default="1.0.0")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    # Higher priority overlays win id conflicts
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    files: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    file_modes: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    renames: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
