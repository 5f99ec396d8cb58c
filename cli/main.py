# cli/main.py
# ============================================================
# docraster — Command Line Interface
# ============================================================
# Typer-based CLI around the rasterization pipeline. Provides
# commands to prepare a document's page images, inspect its
# cache, and clear it.
#
# Usage:
#   python -m cli.main prepare /docs/report.pdf
#   python -m cli.main prepare            # asks for the path
#   python -m cli.main status /docs/report.pdf
#   python -m cli.main clear /docs/report.pdf
# ============================================================

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config.settings import settings
from docraster.cache.inspector import (
    CacheState,
    inspect_cache,
    invalidate_cache,
)
from docraster.document.counter import count_pages
from docraster.document.paths import resolve_cache_dir
from docraster.document.selection import select_document
from docraster.errors import DocRasterError
from docraster.pipeline.emitter import ImageLoaded
from docraster.pipeline.orchestrator import PipelineOrchestrator, PipelineResult
from docraster.render.rasterizer import build_rasterizer

# ============================================================
# CLI App Setup
# ============================================================

app = typer.Typer(
    name="docraster",
    help=(
        "📄 docraster — PDF pages to cached WebP images\n\n"
        "Renders every page of a PDF with an external rasterizer, caches the\n"
        "images next to the document and replays the cache on later runs."
    ),
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


class ConsoleNotifier:
    """Prints one line per delivered page."""

    def __init__(self):
        self.events: list[ImageLoaded] = []

    def emit(self, channel: str, event: ImageLoaded) -> None:
        self.events.append(event)
        console.print(
            f"[green]{channel}[/green] page {event.page_number:>4} — "
            f"{Path(event.source_path).name} ({len(event.image_bytes) / 1024:.1f} KB)"
        )


def _ask_for_document() -> Optional[str]:
    return Prompt.ask("PDF document to prepare", default="", show_default=False)


# ============================================================
# Commands
# ============================================================

@app.command()
def prepare(
    input_path: Optional[str] = typer.Argument(
        None,
        help="Path to the PDF document. Asked for interactively when omitted.",
    ),
    backend: Optional[str] = typer.Option(
        None,
        "--backend", "-b",
        help="Rasterizer backend: magick | poppler. Default: from settings.",
    ),
):
    """
    🖼️  Render (or replay from cache) every page of a PDF.

    Examples:
        prepare /docs/report.pdf
        prepare /docs/report.pdf --backend poppler
    """
    try:
        if input_path:
            document = Path(input_path)
        else:
            document = select_document(_ask_for_document)
        rasterizer = build_rasterizer(backend)
    except (DocRasterError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(Panel(
        f"[bold blue]docraster[/bold blue] — Document Preparation\n"
        f"Input:   {document}\n"
        f"Backend: {backend or settings.rasterizer_backend}",
        title="📄 docraster",
        border_style="blue",
    ))

    notifier = ConsoleNotifier()
    pipeline = PipelineOrchestrator(notifier=notifier, rasterizer=rasterizer)

    try:
        result = asyncio.run(pipeline.prepare(document))
    except DocRasterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    _print_results_table(result)


@app.command()
def status(
    input_path: str = typer.Argument(..., help="Path to the PDF document."),
):
    """
    🔎 Show a document's cache state without rendering anything.
    """
    try:
        document = Path(input_path).expanduser().absolute()
        cache_dir = resolve_cache_dir(document)
        page_count = count_pages(document)
        cache = inspect_cache(cache_dir, page_count)
    except DocRasterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    state_color = {
        CacheState.COMPLETE: "green",
        CacheState.MISMATCHED: "yellow",
        CacheState.ABSENT: "red",
    }[cache.state]

    table = Table(title="Cache Status", show_header=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")
    table.add_row("Document", str(document))
    table.add_row("Cache Dir", str(cache_dir))
    table.add_row("Pages", str(page_count))
    table.add_row("Rendered", str(cache.found))
    table.add_row("State", f"[{state_color}]{cache.state.value}[/{state_color}]")
    console.print(table)


@app.command()
def clear(
    input_path: str = typer.Argument(..., help="Path to the PDF document."),
):
    """
    🧹 Delete the rendered pages cached for a document.
    """
    try:
        cache_dir = resolve_cache_dir(Path(input_path).expanduser().absolute())
        if not cache_dir.exists():
            console.print(f"Nothing to clear: {cache_dir} does not exist.")
            return
        removed = invalidate_cache(cache_dir)
    except DocRasterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"Removed [bold]{removed}[/bold] rendered pages from {cache_dir}")


# ============================================================
# Helper Functions
# ============================================================

def _print_results_table(result: PipelineResult) -> None:
    """Print a summary table of the pipeline run."""
    table = Table(title="Preparation Summary", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Document", result.source_path)
    table.add_row("Cache Dir", result.cache_dir)
    table.add_row("Pages", str(result.page_count))
    table.add_row("Cache", "[green]hit[/green]" if result.cache_hit else "[yellow]miss[/yellow]")
    table.add_row("Rendered", str(result.pages_rendered))
    table.add_row("Delivered", f"{result.pages_emitted}/{result.page_count}")
    table.add_row("Stale Removed", str(result.files_removed))
    table.add_row("Total Time", f"{result.latency_ms:.0f}ms")

    console.print(table)


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    app()
