"""Catalog extraction: reader dispatch, family assembly, totals."""

from __future__ import annotations

from typing import Callable, Union

from ..models.catalog import CatalogAnalysis, ControlFamily, RootDocument
from ..models.document import OscalFormat
from ..readers.limits import DEFAULT_MAX_DEPTH
from ..readers.tree_reader import read_json, read_yaml
from ..readers.xml_reader import read_xml
from .counter import count_controls
from .errors import AnalysisFailed, ReaderError, UnsupportedFormat

UNKNOWN_ID = "unknown"
UNGROUPED_ID = "ungrouped"
UNGROUPED_TITLE = "Ungrouped Controls"

READERS: dict[OscalFormat, Callable[..., RootDocument]] = {
    OscalFormat.XML: read_xml,
    OscalFormat.JSON: read_json,
    OscalFormat.YAML: read_yaml,
}


def resolve_format(fmt: Union[str, OscalFormat]) -> OscalFormat:
    """Map a declared format tag to an OscalFormat, or raise UnsupportedFormat."""
    try:
        return OscalFormat(fmt)
    except ValueError:
        raise UnsupportedFormat(fmt) from None


def build_analysis(document: RootDocument) -> CatalogAnalysis:
    """Assemble families and totals from a normalized catalog tree."""
    families: list[ControlFamily] = []

    for group in document.groups:
        family_id = group.id or UNKNOWN_ID
        families.append(ControlFamily(
            id=family_id,
            title=group.title or family_id,
            control_count=count_controls(group),
        ))

    # Top-level controls outside any group
    if document.controls:
        families.append(ControlFamily(
            id=UNGROUPED_ID,
            title=UNGROUPED_TITLE,
            control_count=len(document.controls),
        ))

    return CatalogAnalysis(
        metadata=document.metadata,
        total_controls=sum(f.control_count for f in families),
        families=families,
    )


def analyze_catalog(
    content: str,
    fmt: Union[str, OscalFormat],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> CatalogAnalysis:
    """Analyze a catalog document in the declared format.

    Raises:
        UnsupportedFormat: ``fmt`` is not xml, json or yaml.
        AnalysisFailed: the reader rejected the content; the reader error is
            available as ``cause``.
    """
    reader = READERS[resolve_format(fmt)]

    try:
        document = reader(content, max_depth=max_depth)
    except ReaderError as e:
        raise AnalysisFailed(f"Failed to analyze catalog: {e}", cause=e) from e

    return build_analysis(document)
