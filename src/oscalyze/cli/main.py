"""oscalyze command line: analyze and classify OSCAL documents."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.classifier import detect_document_type, detect_format_from_filename
from ..core.config import get_effective_config
from ..core.errors import AnalysisFailed
from ..core.extractor import analyze_catalog
from ..formatters.report import export_analysis_json, format_analysis_json, format_analysis_markdown
from ..utils.sanitize import sanitize_error

console = Console()
err_console = Console(stderr=True)

FORMAT_CHOICES = click.Choice(["xml", "json", "yaml"])


def _read_document(file: str) -> str:
    try:
        return Path(file).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"  [red]ERROR[/red] Cannot read {escape(file)}: {escape(sanitize_error(str(e)))}", soft_wrap=True)
        sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="oscalyze")
def oscalyze_cli() -> None:
    """oscalyze - structural analysis of OSCAL catalogs (XML, JSON, YAML)."""


@oscalyze_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICES, help="Declared format (default: from extension)")
@click.option("--output-format", "-o", type=click.Choice(["json", "markdown"]), help="Report format")
@click.option("--output", type=click.Path(dir_okay=False), help="Write the report to a file")
@click.option("--max-depth", type=click.IntRange(min=1), help="Maximum group nesting depth")
@click.option("--project", "-p", type=click.Path(exists=True, file_okay=False), default=".",
              help="Directory holding .oscalyze/config.yaml")
def analyze(
    file: str,
    fmt: str | None,
    output_format: str | None,
    output: str | None,
    max_depth: int | None,
    project: str,
) -> None:
    """Count controls per family in a catalog document."""
    overrides: dict = {}
    if output_format:
        overrides["output"] = {"format": output_format}
    if max_depth:
        overrides["analysis"] = {"max_depth": max_depth}
    config = get_effective_config(Path(project), cli_overrides=overrides)

    declared = fmt or detect_format_from_filename(file).value
    content = _read_document(file)

    try:
        analysis = analyze_catalog(content, declared, max_depth=config["analysis"]["max_depth"])
    except AnalysisFailed as e:
        err_console.print(f"  [red]ERROR[/red] {escape(sanitize_error(str(e)))}", soft_wrap=True)
        sys.exit(1)

    report_format = config["output"]["format"]
    indent = config["output"]["indent"]

    if output:
        output_path = Path(output)
        if report_format == "markdown":
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(format_analysis_markdown(analysis, source=Path(file).name), encoding="utf-8")
        else:
            export_analysis_json(analysis, output_path, indent=indent)
        console.print(
            f"  [green]OK[/green] {analysis.total_controls} controls in "
            f"{len(analysis.families)} families -> {escape(str(output_path))}",
            soft_wrap=True,
        )
        return

    if report_format == "markdown":
        click.echo(format_analysis_markdown(analysis, source=Path(file).name))
    else:
        click.echo(format_analysis_json(analysis, indent))


@oscalyze_cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICES, help="Declared format (default: from extension)")
def detect(file: str, fmt: str | None) -> None:
    """Guess the OSCAL document type (catalog, profile, ssp, sar)."""
    declared = fmt or detect_format_from_filename(file).value
    click.echo(detect_document_type(_read_document(file), declared).value)


def main() -> None:
    oscalyze_cli()


if __name__ == "__main__":
    main()
