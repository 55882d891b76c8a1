"""Analyzer exception hierarchy."""

from __future__ import annotations

from typing import Optional


class AnalyzerError(Exception):
    """Base class for every error raised by oscalyze."""


class ReaderError(AnalyzerError):
    """A format reader could not turn the content into a catalog tree."""


class DocumentSyntaxError(ReaderError):
    """The content is not valid XML, JSON or YAML."""


class InvalidCatalogShape(ReaderError):
    """The content parses, but does not have a catalog root."""


class NestingTooDeep(InvalidCatalogShape):
    """Group nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int):
        super().__init__(f"Group nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth


class AnalysisFailed(AnalyzerError):
    """Outward-facing failure of analyze_catalog.

    The underlying reader error is kept on ``cause`` (and ``__cause__``).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UnsupportedFormat(AnalysisFailed):
    def __init__(self, fmt: object):
        super().__init__(f"Unsupported format: {fmt}")
        self.format = fmt
