from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ingest_service.assemble.corpus import SourceUrls, build_corpus_from_files
from ingest_service.assemble.validate import validate_corpus
from ingest_service.assemble.writer import load_corpus, summarize, write_corpus
from ingest_service.enrich import apply_enrichments
from ingest_service.errors import BuildReport, CorpusBuildError
from ingest_service.fetch.snapshot import fetch_source
from ingest_service.settings import settings

app = typer.Typer(help="Ethics corpus builder (fetch, segment, cross-link, validate, write).")
console = Console()
err_console = Console(stderr=True)


def _fail(exc: CorpusBuildError) -> NoReturn:
    err_console.print(f"[bold red]✗ {escape(exc.message)}[/bold red]", highlight=False)
    raise typer.Exit(1)


def _print_warnings(report: BuildReport) -> None:
    for warning in report.warnings:
        err_console.print(f"[yellow]{escape(warning.to_log_message())}[/yellow]", highlight=False)
    if report.warnings:
        err_console.print(f"[yellow]{len(report.warnings)} warning(s)[/yellow]")


def _print_summary(items: list) -> None:
    summary = summarize(items)
    table = Table(title="Summary by kind")
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right")
    for kind, count in summary.by_kind.items():
        table.add_row(kind, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{summary.total}[/bold]")
    console.print(table)
    console.print(f"Parts covered: {', '.join(str(p) for p in summary.parts) or '-'}")


@app.command()
def fetch(
    *,
    english_path: Path | None = typer.Option(None, help="Where to store the English HTML."),
    latin_path: Path | None = typer.Option(None, help="Where to store the Latin Part I HTML."),
) -> None:
    """
    Download the raw English and Latin sources for offline segmentation.

    Note: requires network access at runtime.
    """
    targets = [
        (settings.english_source_url, english_path or settings.raw_english_path),
        (settings.latin_source_url, latin_path or settings.raw_latin_path),
    ]
    for url, target in targets:
        console.print(f"Fetching {url} ...")
        try:
            snap = fetch_source(
                url,
                target,
                user_agent=settings.user_agent,
                timeout_s=settings.request_timeout_s,
                max_bytes=settings.max_bytes,
            )
        except CorpusBuildError as exc:
            _fail(exc)
        console.print(f"[green]✓[/green] stored: {snap.raw_path} ({snap.size} bytes, sha256 {snap.sha256[:12]})")


@app.command()
def build(
    *,
    english_path: Path | None = typer.Option(None, help="Raw English HTML (default from settings)."),
    latin_path: Path | None = typer.Option(None, help="Raw Latin Part I HTML (default from settings)."),
    output: Path | None = typer.Option(None, help="Corpus JSON to write (default from settings)."),
    enrich: bool = typer.Option(False, "--enrich/--no-enrich", help="Also apply concept/dependency enrichment."),
) -> None:
    """
    Build the corpus:
    - segment the English source into typed statements
    - attach the Latin text of Part I by id
    - validate global invariants, then write the JSON corpus

    Nothing is written when any step fails.
    """
    english_path = english_path or settings.raw_english_path
    latin_path = latin_path or settings.raw_latin_path
    output = output or settings.output_path
    sources = SourceUrls(english=settings.english_source_url, latin=settings.latin_source_url)

    report = BuildReport()
    try:
        result = build_corpus_from_files(english_path, latin_path, sources=sources)
        report = result.report
        if enrich:
            apply_enrichments(result.items, report)
        validate_corpus(result.items, min_size=settings.min_corpus_size, report=report)
    except CorpusBuildError as exc:
        _print_warnings(report)
        _fail(exc)

    _print_warnings(report)
    written = write_corpus(result.items, output)
    console.print(f"[green]✓[/green] Wrote {written.count} items to {written.path}")
    _print_summary(result.items)
    console.print(f"sha256: {written.sha256}")


@app.command()
def enrich(
    *,
    corpus: Path | None = typer.Option(None, help="Corpus JSON to enrich in place (default from settings)."),
) -> None:
    """Add concept tags, dependencies, proof notes and curated Part I logic to an existing corpus."""
    corpus = corpus or settings.output_path
    report = BuildReport()
    try:
        items = apply_enrichments(load_corpus(corpus), report)
        validate_corpus(items, min_size=settings.min_corpus_size, report=report)
    except CorpusBuildError as exc:
        _print_warnings(report)
        _fail(exc)
    _print_warnings(report)
    written = write_corpus(items, corpus)
    console.print(f"[green]✓[/green] Enriched {written.count} items in {written.path}")


@app.command()
def inspect(
    item_id: str,
    *,
    corpus: Path | None = typer.Option(None, help="Corpus JSON to read (default from settings)."),
) -> None:
    """Print one record of a built corpus as JSON."""
    try:
        items = load_corpus(corpus or settings.output_path)
    except CorpusBuildError as exc:
        _fail(exc)
    for item in items:
        if item.id == item_id:
            typer.echo(json.dumps(item.to_record(), ensure_ascii=False, indent=2))
            return
    err_console.print(f"[red]No item with id {item_id}[/red]")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
