"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from artpub.config import Settings, load_config
from artpub.core.parse import MarkupAdapter
from artpub.core.pipeline import load_document, run_transform
from artpub.util.logging_config import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _adapter(settings: Settings) -> MarkupAdapter:
    try:
        return MarkupAdapter.from_settings(settings)
    except ValueError as e:
        _fail(str(e))


def _load(path: str, settings: Settings):
    """Read and transform a single article file, failing cleanly on bad input."""
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        return load_document(p, _adapter(settings), settings.content_field)
    except (OSError, ValueError) as e:
        _fail(f"Failed to read {path}", e)


def transform_cmd(
    path: Annotated[str, typer.Argument(help="Article file or directory (.html, .htm, .json)")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser", help="BeautifulSoup parser backend")] = None,
    field: Annotated[Optional[str], typer.Option("--content-field", help="Markup field in article JSON")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr")] = False,
    ):
    """Write normalized HTML + toc/faq sidecar JSON for each article."""
    setup_logging(verbose)
    settings = _settings(overrides={"output_dir": out, "parser": parser, "content_field": field})
    if not Path(path).exists():
        _fail(f"Path not found: {path}")
    output_dir = Path(settings.output_dir)
    adapter = _adapter(settings)

    try:
        results = run_transform(path, output_dir, adapter, settings.content_field, settings.json_indent)
    except RuntimeError as e:
        _fail(str(e))
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Transformed {len(results)} article(s) to {output_dir}/")


def toc_cmd(
    path: Annotated[str, typer.Argument(help="Article file (.html, .htm, .json)")],
    ):
    """Print the table of contents of an article, indented by heading level."""
    setup_logging()
    _, doc = _load(path, _settings())
    if not doc.toc:
        typer.echo("No headings found.")
        return
    for entry in doc.toc:
        indent = "  " * (entry.level - 2)
        typer.echo(f"{indent}{entry.text}  #{entry.id}")


def faq_cmd(
    path: Annotated[str, typer.Argument(help="Article file (.html, .htm, .json)")],
    ):
    """Print the FAQ question/answer pairs of an article as JSON."""
    setup_logging()
    settings = _settings()
    _, doc = _load(path, settings)
    pairs = [p.model_dump(by_alias=True) for p in doc.faq]
    typer.echo(json.dumps(pairs, indent=settings.json_indent or None, ensure_ascii=False))
