"""Limits shared by the format readers."""

from __future__ import annotations

# Deepest group nesting a reader will follow. Real catalogs nest a few levels.
DEFAULT_MAX_DEPTH = 256
