"""Document-type sniffing on raw text.

This is a best-effort marker search, not a parse: it runs on content that
would fail structural parsing and never raises. Rules are evaluated in a
fixed order (assessment results, SSP, profile, catalog) and the first match
wins, since one document can carry markers for several types. A profile
importing a catalog mentions both words, for example.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Callable, Union

from ..models.document import DocumentType, OscalFormat

Rule = tuple[Callable[[str], bool], DocumentType]


def _has_any(*markers: str) -> Callable[[str], bool]:
    return lambda text: any(m in text for m in markers)


def _has_all(*markers: str) -> Callable[[str], bool]:
    return lambda text: all(m in text for m in markers)


RULES: dict[OscalFormat, list[Rule]] = {
    OscalFormat.JSON: [
        (_has_any('"assessment-results"', "assessment-results"), DocumentType.SAR),
        (_has_any('"system-security-plan"', "system-security-plan"), DocumentType.SSP),
        # "profile" alone is too common a word; require the imports key
        (_has_all("profile", '"imports"'), DocumentType.PROFILE),
        (_has_all("catalog", "{"), DocumentType.CATALOG),
    ],
    OscalFormat.YAML: [
        (_has_any("assessment-results:", "assessment_results:"), DocumentType.SAR),
        (_has_any("system-security-plan:", "system_security_plan:"), DocumentType.SSP),
        (_has_all("profile:", "imports:"), DocumentType.PROFILE),
        (_has_any("catalog:"), DocumentType.CATALOG),
    ],
    OscalFormat.XML: [
        (_has_any("<assessment-results", "<assessment_results"), DocumentType.SAR),
        (_has_any("<system-security-plan", "<system_security_plan"), DocumentType.SSP),
        (_has_any("<profile"), DocumentType.PROFILE),
        (_has_any("<catalog"), DocumentType.CATALOG),
    ],
}

EXTENSION_FORMATS = {
    ".xml": OscalFormat.XML,
    ".json": OscalFormat.JSON,
    ".yaml": OscalFormat.YAML,
    ".yml": OscalFormat.YAML,
}


def detect_document_type(content: str, fmt: Union[str, OscalFormat]) -> DocumentType:
    """Guess which kind of OSCAL document ``content`` is."""
    try:
        rules = RULES[OscalFormat(fmt)]
    except (ValueError, TypeError):
        return DocumentType.UNKNOWN
    if not isinstance(content, str):
        return DocumentType.UNKNOWN

    text = content.lower().strip()
    for predicate, document_type in rules:
        if predicate(text):
            return document_type
    return DocumentType.UNKNOWN


def detect_format_from_filename(file_name: str) -> OscalFormat:
    """Infer the serialization from a file extension. Defaults to JSON."""
    return EXTENSION_FORMATS.get(PurePath(file_name).suffix.lower(), OscalFormat.JSON)
