"""Document format and type enums."""

from __future__ import annotations

from enum import Enum


class OscalFormat(str, Enum):
    XML = "xml"
    JSON = "json"
    YAML = "yaml"


class DocumentType(str, Enum):
    CATALOG = "catalog"
    PROFILE = "profile"
    SSP = "ssp"
    SAR = "sar"
    UNKNOWN = "unknown"
