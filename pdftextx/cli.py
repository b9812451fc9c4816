"""
Command-line interface for pdftextx.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from .backends.pypdf_backend import PypdfBackend
from .batch import BatchExtractor
from .exceptions import PDFTextException
from .extractor import PageTextExtractor
from .fonts import FontRegistry
from .types import ExtractionOptions
from .utils import configure_logging, parse_page_spec

console = Console()


def _options(line_epsilon, tab_threshold, password, pages):
    return ExtractionOptions(
        line_epsilon=line_epsilon,
        tab_threshold=tab_threshold,
        password=password,
        page_numbers=parse_page_spec(pages) if pages else None,
    )


def heuristic_options(func):
    func = click.option(
        '--line-epsilon',
        default=ExtractionOptions.line_epsilon,
        show_default=True,
        type=float,
        help='Vertical movement below which a move stays on the same line',
    )(func)
    func = click.option(
        '--tab-threshold',
        default=ExtractionOptions.tab_threshold,
        show_default=True,
        type=float,
        help='Horizontal movement above which a tab is inserted',
    )(func)
    func = click.option('--password', default=None, help='Password for encrypted PDFs')(func)
    return func


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdftextx - Reconstruct plain text from PDF content streams.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--output', '-o', default=None, type=click.Path(), help='Write text to this file')
@click.option('--pages', '-p', default=None, help='Pages to extract, e.g. "1,3-5"')
@click.option('--separator', default='\f', show_default=True, help='Text placed between pages')
@heuristic_options
def extract(input_pdf, output, pages, separator, password, tab_threshold, line_epsilon):
    """
    Extract the text of a PDF file.

    Examples:

        pdftextx extract statement.pdf

        pdftextx extract statement.pdf -p 1-2 -o statement.txt
    """
    try:
        options = _options(line_epsilon, tab_threshold, password, pages)
        backend = PypdfBackend()
        document = backend.load(input_pdf, password=options.password)
        extracted = PageTextExtractor(options).extract(document, source_file=input_pdf)
        text = separator.join(extracted.pages)

        if output:
            with open(output, 'w', encoding='utf-8') as handle:
                handle.write(text)
            console.print(
                f"[bold green]✓ Extracted {len(extracted.pages)} pages[/bold green] "
                f"[dim]→ {os.path.abspath(output)}[/dim]"
            )
        else:
            click.echo(text)

    except PDFTextException as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--password', default=None, help='Password for encrypted PDFs')
def show_info(input_pdf, password):
    """
    Display metadata and the font decoders of every page.

    Example:

        pdftextx info statement.pdf
    """
    try:
        document = PypdfBackend().load(input_pdf, password=password)
    except PDFTextException as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    info_table = Table(title="PDF Information", show_header=False)
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="green")
    info_table.add_row("File", os.path.basename(input_pdf))
    info_table.add_row("Pages", str(document.num_pages))
    if document.title:
        info_table.add_row("Title", document.title)
    if document.author:
        info_table.add_row("Author", document.author)
    console.print(info_table)

    font_table = Table(title="Fonts")
    font_table.add_column("Page", style="cyan")
    font_table.add_column("Font", style="magenta")
    font_table.add_column("Decoder", style="green")
    for page in document.iter_pages():
        registry = FontRegistry.from_page(page)
        for name, kind in registry.summary().items():
            font_table.add_row(str(page.index + 1), name, kind.value)
    console.print(font_table)


@cli.command(name="batch")
@click.argument('input_dir', type=click.Path(exists=True, file_okay=False))
@click.option(
    '--output-dir', '-o',
    default='./output',
    help='Directory receiving one .txt file per PDF',
    type=click.Path()
)
@heuristic_options
def batch(input_dir, output_dir, password, tab_threshold, line_epsilon):
    """
    Extract text from every PDF in a directory.

    Documents that cannot be read are reported and skipped.
    """
    extractor = BatchExtractor(options=_options(line_epsilon, tab_threshold, password, None))
    try:
        pdf_files = extractor.find_pdf_files(input_dir)
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Extracting", total=len(pdf_files))

            def update_progress(current_file, current, total):
                progress.update(task, completed=current - 1, description=os.path.basename(current_file))

            result = extractor.process_directory(input_dir, output_dir, progress_callback=update_progress)
            progress.update(task, completed=len(pdf_files), description="Extracting")
    except (FileNotFoundError, PDFTextException) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    console.print(
        f"\n[bold green]✓ {result.success} extracted[/bold green], "
        f"[bold red]{result.failure} failed[/bold red] of {result.total} PDFs"
    )
    for record in result.results:
        if not record["success"]:
            console.print(f"  • {os.path.basename(record['file'])}: {record['error']}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
