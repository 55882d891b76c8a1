"""oscalyze - structural analyzer for OSCAL catalog documents."""

from __future__ import annotations

__version__ = "1.0.0"

from .core.classifier import detect_document_type, detect_format_from_filename
from .core.errors import (
    AnalysisFailed,
    AnalyzerError,
    DocumentSyntaxError,
    InvalidCatalogShape,
    NestingTooDeep,
    ReaderError,
    UnsupportedFormat,
)
from .core.extractor import analyze_catalog
from .models.catalog import CatalogAnalysis, CatalogMetadata, ControlFamily
from .models.document import DocumentType, OscalFormat

__all__ = [
    "__version__",
    "AnalysisFailed",
    "AnalyzerError",
    "CatalogAnalysis",
    "CatalogMetadata",
    "ControlFamily",
    "DocumentSyntaxError",
    "DocumentType",
    "InvalidCatalogShape",
    "NestingTooDeep",
    "OscalFormat",
    "ReaderError",
    "UnsupportedFormat",
    "analyze_catalog",
    "detect_document_type",
    "detect_format_from_filename",
]
