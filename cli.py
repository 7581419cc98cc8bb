#!/usr/bin/env python3
"""Command-line interface for livemd-extractor."""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from livemd_extractor import (
    ExtractionError,
    LivebookCellExtractor,
    RegexCellExtractor,
    create_extractor,
)
from livemd_extractor.comparison import built_in_cases, compare_extractors
from livemd_extractor.config import get_settings
from livemd_extractor.constants import __app_name__, __version__

console = Console()
settings = get_settings()


def read_document(file_path: str) -> str:
    """Read a document, refusing files over the configured size limit."""
    size = os.path.getsize(file_path)
    if size > settings.extraction.max_document_size:
        console.print(
            f"[red]Error:[/red] {escape(file_path)} is {size} bytes, "
            f"limit is {settings.extraction.max_document_size}"
        )
        sys.exit(1)

    with open(file_path, encoding='utf-8') as f:
        return f.read()


language_option = click.option(
    '--language',
    default=None,
    help='Fence language tag (default: from config)',
)


@click.group()
@click.version_option(__version__, prog_name=__app_name__)
def cli():
    """livemd-extractor CLI - Extract code cells from Livebook markdown."""
    pass


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@language_option
def cells(file_path: str, language: str | None):
    """Print the real code cells of a document."""
    extractor = LivebookCellExtractor(language or settings.extraction.language)
    content = read_document(file_path)

    try:
        code_cells = extractor.extract_code_cells(content)
    except ExtractionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(f"Found {len(code_cells)} real {escape(extractor.language)} code cells:\n")
    for index, code in enumerate(code_cells, 1):
        console.print(f"[bold]--- Code Cell {index} ---[/bold]")
        console.print(code, markup=False, highlight=False)


@cli.command('all')
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@language_option
def all_cells(file_path: str, language: str | None):
    """Print every code cell, marking force_markdown examples."""
    extractor = LivebookCellExtractor(language or settings.extraction.language)
    content = read_document(file_path)

    try:
        code_cells = extractor.extract_all_code_cells(content)
    except ExtractionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    for index, (code, is_doc_only) in enumerate(code_cells, 1):
        if is_doc_only:
            label = "[yellow]\\[MARKDOWN EXAMPLE][/yellow]"
        else:
            label = "[green]\\[REAL CODE][/green]"
        console.print(f"[bold]--- Cell {index}[/bold] {label} [bold]---[/bold]")
        console.print(code, markup=False, highlight=False)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@language_option
@click.option(
    '--extractor',
    'kind',
    type=click.Choice(['livebook', 'regex']),
    default=None,
    help='Extractor to use (default: from config)',
)
def executable(file_path: str, language: str | None, kind: str | None):
    """Print the executable code as a single string."""
    kind = kind or settings.extraction.default_extractor
    extractor = create_extractor(kind=kind, language=language or settings.extraction.language)
    if extractor is None:
        console.print(f"[red]Error:[/red] unknown extractor {escape(kind)!r}")
        sys.exit(1)

    click.echo(extractor.extract_executable_code(read_document(file_path)))


@cli.command()
@click.argument('file_paths', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@language_option
def compare(file_paths: tuple, language: str | None):
    """Check the scanner against the line-based extractor."""
    language = language or settings.extraction.language
    cases = built_in_cases()
    cases.extend((os.path.basename(path), read_document(path)) for path in file_paths)

    results = compare_extractors(
        cases,
        reference=RegexCellExtractor(language),
        candidate=LivebookCellExtractor(language),
    )

    table = Table(title="Extractor Comparison")
    table.add_column("Case", style="cyan")
    table.add_column("Regex", justify="right")
    table.add_column("Scanner", justify="right")
    table.add_column("Result")

    for result in results:
        table.add_row(
            escape(result.name),
            str(len(result.reference_output)),
            str(len(result.candidate_output)),
            "[green]✓ PASSED[/green]" if result.passed else "[red]✗ MISMATCH[/red]",
        )

    console.print(table)

    failed = [result for result in results if not result.passed]
    for result in failed:
        console.print(f"\n[red]Mismatch in {escape(result.name)}[/red]")
        console.print(f"  Regex:   {result.reference_output!r}", markup=False, highlight=False)
        console.print(f"  Scanner: {result.candidate_output!r}", markup=False, highlight=False)

    if failed:
        console.print(f"\n[red]✗[/red] {len(failed)} of {len(results)} cases differ.")
        sys.exit(1)

    console.print(f"\n[green]✓[/green] All {len(results)} cases produce identical results.")


if __name__ == "__main__":
    cli()
