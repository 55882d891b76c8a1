"""Markdown and JSON output for catalog analyses."""

from __future__ import annotations

import json
from pathlib import Path

from ..models.catalog import CatalogAnalysis

# (label, CatalogMetadata field)
_METADATA_ROWS = [
    ("Version", "version"),
    ("OSCAL Version", "oscal_version"),
    ("Published", "published"),
    ("Last Modified", "last_modified"),
]


def format_analysis_markdown(analysis: CatalogAnalysis, source: str = "") -> str:
    """Render a catalog analysis as a markdown summary."""
    metadata = analysis.metadata

    lines: list[str] = []
    lines.append(f"# {metadata.title}")
    lines.append("")
    if source:
        lines.append(f"**Source:** {source}")
    for label, field in _METADATA_ROWS:
        value = getattr(metadata, field)
        if value is not None:
            lines.append(f"**{label}:** {value}")
    lines.append(f"**Total Controls:** {analysis.total_controls}")
    lines.append("")

    lines.append("## Control Families")
    lines.append("")
    if not analysis.families:
        lines.append("No controls found.")
        return "\n".join(lines)

    lines.append("| Family | Title | Controls |")
    lines.append("|--------|-------|----------|")
    for family in analysis.families:
        title = family.title.replace("|", "\\|")
        lines.append(f"| {family.id} | {title} | {family.control_count} |")
    lines.append(f"| **Total** | | **{analysis.total_controls}** |")

    return "\n".join(lines)


def format_analysis_json(analysis: CatalogAnalysis, indent: int = 2) -> str:
    return json.dumps(analysis.to_dict(), indent=indent, ensure_ascii=False)


def export_analysis_json(analysis: CatalogAnalysis, output_path: Path, indent: int = 2) -> Path:
    """Write an analysis to a JSON file (UTF-8, no BOM)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_analysis_json(analysis, indent), encoding="utf-8")
    return output_path
