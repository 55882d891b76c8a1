"""JSON and YAML catalog readers.

Both serializations load into the same generic object tree (dicts, lists and
scalars) and share one extraction routine. Keys keep the hyphenated OSCAL
spelling (``last-modified``, ``oscal-version``).
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

import yaml
from yaml.composer import ComposerError

from ..core.errors import DocumentSyntaxError, InvalidCatalogShape, NestingTooDeep
from ..models.catalog import UNTITLED_CATALOG, CatalogMetadata, Control, Group, RootDocument
from .limits import DEFAULT_MAX_DEPTH

# metadata key -> CatalogMetadata field
METADATA_KEYS = {
    "title": "title",
    "version": "version",
    "last-modified": "last_modified",
    "oscal-version": "oscal_version",
    "published": "published",
}

# Total nodes that alias references may expand to in one YAML document
MAX_ALIAS_EXPANSION = 10_000

_YAML_BOOL = "tag:yaml.org,2002:bool"
_VERBATIM_TAGS = {
    _YAML_BOOL,
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:timestamp",
}


def _node_size(node: yaml.Node, sizes: dict[int, int]) -> int:
    """Number of nodes under ``node`` once every alias is expanded."""
    key = id(node)
    if key in sizes:
        return sizes[key]
    # Recursive aliases count once
    sizes[key] = 1

    size = 1
    if isinstance(node, yaml.SequenceNode):
        size += sum(_node_size(child, sizes) for child in node.value)
    elif isinstance(node, yaml.MappingNode):
        size += sum(_node_size(k, sizes) + _node_size(v, sizes) for k, v in node.value)
    sizes[key] = size
    return size


class CatalogLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and timestamps as written.

    Nulls still load as None, and only true/false load as booleans. Alias
    expansion is capped at MAX_ALIAS_EXPANSION nodes.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in _VERBATIM_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def __init__(self, stream):
        super().__init__(stream)
        self._alias_sizes: dict[int, int] = {}
        self._alias_expansion = 0

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            target = self.anchors.get(event.anchor)
            if target is not None:
                self._alias_expansion += _node_size(target, self._alias_sizes)
                if self._alias_expansion > MAX_ALIAS_EXPANSION:
                    raise ComposerError(
                        None, None,
                        f"aliases expand to more than {MAX_ALIAS_EXPANSION} nodes",
                        event.start_mark,
                    )
        return super().compose_node(parent, index)


CatalogLoader.add_implicit_resolver(
    _YAML_BOOL,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _scalar(value: Any) -> Optional[str]:
    """Return a scalar as text; containers, null and booleans are treated as absent."""
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    return value if isinstance(value, str) else str(value)


def _list(node: dict, key: str) -> list:
    value = node.get(key)
    return value if isinstance(value, list) else []


def _read_metadata(catalog: dict) -> CatalogMetadata:
    metadata = catalog.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}

    values = {field: _scalar(metadata.get(key)) for key, field in METADATA_KEYS.items()}
    return CatalogMetadata(
        title=values.pop("title") or UNTITLED_CATALOG,
        **values,
    )


def _read_control(node: Any) -> Control:
    if not isinstance(node, dict):
        return Control()
    return Control(id=_scalar(node.get("id")), title=_scalar(node.get("title")))


def _read_group(node: Any, depth: int, max_depth: int) -> Group:
    if not isinstance(node, dict):
        raise InvalidCatalogShape(f"Invalid catalog: group entry is not an object ({type(node).__name__})")
    if depth > max_depth:
        raise NestingTooDeep(max_depth)

    return Group(
        id=_scalar(node.get("id")) or None,
        title=_scalar(node.get("title")) or None,
        controls=[_read_control(c) for c in _list(node, "controls")],
        groups=[_read_group(g, depth + 1, max_depth) for g in _list(node, "groups")],
    )


def read_object_tree(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> RootDocument:
    """Extract a RootDocument from an already-loaded JSON/YAML object tree."""
    catalog = obj.get("catalog") if isinstance(obj, dict) else None
    if not isinstance(catalog, dict):
        raise InvalidCatalogShape("Invalid catalog: no catalog property found")

    return RootDocument(
        metadata=_read_metadata(catalog),
        groups=[_read_group(g, 1, max_depth) for g in _list(catalog, "groups")],
        controls=[_read_control(c) for c in _list(catalog, "controls")],
    )


def read_json(content: str, max_depth: int = DEFAULT_MAX_DEPTH) -> RootDocument:
    """Parse a JSON catalog into a RootDocument."""
    try:
        obj = json.loads(content)
    except json.JSONDecodeError as e:
        raise DocumentSyntaxError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise DocumentSyntaxError("Invalid JSON: document nesting is too deep to parse") from e
    return read_object_tree(obj, max_depth)


def read_yaml(content: str, max_depth: int = DEFAULT_MAX_DEPTH) -> RootDocument:
    """Parse a YAML catalog into a RootDocument.

    Timestamps and version numbers pass through verbatim; nulls load as None.
    """
    try:
        obj = yaml.load(content, Loader=CatalogLoader)
    except yaml.YAMLError as e:
        raise DocumentSyntaxError(f"Invalid YAML: {e}") from e
    except RecursionError as e:
        raise DocumentSyntaxError("Invalid YAML: document nesting is too deep to parse") from e
    return read_object_tree(obj, max_depth)
