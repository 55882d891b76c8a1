"""XML catalog reader.

Elements are matched by local name, so namespaced OSCAL documents and
un-namespaced ones read the same way. Only direct children are considered
at each level.
"""

from __future__ import annotations

from typing import Iterator, Optional
from xml.etree import ElementTree as ET

from ..core.errors import DocumentSyntaxError, InvalidCatalogShape, NestingTooDeep
from ..models.catalog import UNTITLED_CATALOG, CatalogMetadata, Control, Group, RootDocument
from .limits import DEFAULT_MAX_DEPTH

# metadata child tag -> CatalogMetadata field
METADATA_TAGS = {
    "title": "title",
    "version": "version",
    "last-modified": "last_modified",
    "oscal-version": "oscal_version",
    "published": "published",
}


def _local_name(tag: object) -> str:
    """Strip a '{namespace}' prefix from an element tag."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local_name(child.tag) == name)


def _first_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next(_children(element, name), None)


def _text(element: Optional[ET.Element]) -> Optional[str]:
    """Full text content of an element, including inline markup."""
    if element is None:
        return None
    return "".join(element.itertext())


def _read_metadata(catalog: ET.Element) -> CatalogMetadata:
    metadata = _first_child(catalog, "metadata")
    if metadata is None:
        return CatalogMetadata()

    values: dict[str, Optional[str]] = {}
    for tag, field in METADATA_TAGS.items():
        values[field] = _text(_first_child(metadata, tag))

    return CatalogMetadata(
        title=values.pop("title") or UNTITLED_CATALOG,
        **values,
    )


def _read_control(element: ET.Element) -> Control:
    return Control(id=element.get("id"), title=_text(_first_child(element, "title")))


def _read_group(element: ET.Element, depth: int, max_depth: int) -> Group:
    if depth > max_depth:
        raise NestingTooDeep(max_depth)

    return Group(
        id=element.get("id") or None,
        title=_text(_first_child(element, "title")) or None,
        controls=[_read_control(c) for c in _children(element, "control")],
        groups=[_read_group(g, depth + 1, max_depth) for g in _children(element, "group")],
    )


def read_xml(content: str, max_depth: int = DEFAULT_MAX_DEPTH) -> RootDocument:
    """Parse an XML catalog into a RootDocument."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DocumentSyntaxError(f"Invalid XML: {e}") from e

    if _local_name(root.tag) != "catalog":
        raise InvalidCatalogShape(
            f"Invalid catalog XML: expected <catalog> root element, found <{_local_name(root.tag)}>"
        )

    return RootDocument(
        metadata=_read_metadata(root),
        groups=[_read_group(g, 1, max_depth) for g in _children(root, "group")],
        controls=[_read_control(c) for c in _children(root, "control")],
    )
