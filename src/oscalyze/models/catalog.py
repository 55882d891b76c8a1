"""Catalog analysis data models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNTITLED_CATALOG = "Untitled Catalog"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Control(_Frozen):
    """A leaf entry. Only its presence is counted."""

    id: Optional[str] = None
    title: Optional[str] = None


class Group(_Frozen):
    """A possibly nested container of controls, as found in the source document."""

    id: Optional[str] = None
    title: Optional[str] = None
    controls: list[Control] = []
    groups: list[Group] = []


class CatalogMetadata(_Frozen):
    """Normalized catalog header. Optional values are passed through verbatim."""

    title: str = UNTITLED_CATALOG
    version: Optional[str] = None
    last_modified: Optional[str] = None
    oscal_version: Optional[str] = None
    published: Optional[str] = None


class RootDocument(_Frozen):
    """Format-independent catalog tree produced by every reader."""

    metadata: CatalogMetadata = CatalogMetadata()
    groups: list[Group] = []
    controls: list[Control] = []


class ControlFamily(_Frozen):
    id: str
    title: str
    control_count: int


class CatalogAnalysis(_Frozen):
    """Full analysis result for one catalog document."""

    metadata: CatalogMetadata
    total_controls: int = 0
    families: list[ControlFamily] = []

    def to_dict(self) -> dict:
        """Serialize with camelCase keys, omitting absent metadata fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
