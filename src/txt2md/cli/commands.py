"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from txt2md.config import Settings, load_config
from txt2md.core.extract import SUPPORTED_EXTENSIONS, is_supported
from txt2md.core.models import ConversionFailure, ConvertedDoc
from txt2md.core.pipeline import convert_file, run_archive, run_convert, write_outputs
from txt2md.core.preview import render_html
from txt2md.logging import configure_logging


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


def _convert_all(path: str, settings: Settings) -> tuple[list[ConvertedDoc], list[ConversionFailure]]:
    """Run the batch conversion, exiting 1 when path holds no supported files."""
    converted, failures = run_convert(path, settings)
    if not converted and not failures:
        typer.echo(f"No supported files found at {path} ({', '.join(sorted(SUPPORTED_EXTENSIONS))}).")
        raise typer.Exit(1)
    return converted, failures


def _echo_failures(failures: list[ConversionFailure]) -> None:
    """Print per-file failures to stderr and exit 1 if there were any."""
    for f in failures:
        typer.echo(f"  failed: {f.source}: {f.error}", err=True)
    if failures:
        typer.echo(f"{len(failures)} document(s) failed to convert.", err=True)
        raise typer.Exit(1)


def convert_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    docx_mode: Annotated[Optional[str], typer.Option("--docx-mode", help="Word handling: text or html")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print Markdown instead of writing files")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file")] = None,
    ):
    """Convert .txt/.doc/.docx files to Markdown, one .md file per source."""
    configure_logging(verbose=verbose, quiet=stdout, log_file=log_file)
    settings = _settings(overrides={"output_dir": out, "docx_mode": docx_mode})
    converted, failures = _convert_all(path, settings)

    if stdout:
        for doc in converted:
            typer.echo(doc.markdown)
    else:
        output_dir = Path(settings.output_dir)
        try:
            written = write_outputs(converted, output_dir)
        except OSError as e:
            _fail("Writing output failed", e)
        for src, out_file in written:
            typer.echo(f"  {src} -> {out_file}")
        typer.echo(f"Converted {len(written)} document(s) to {output_dir}/")

    _echo_failures(failures)


def archive_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    name: Annotated[Optional[str], typer.Option("--name", help="Archive filename (.zip)")] = None,
    docx_mode: Annotated[Optional[str], typer.Option("--docx-mode", help="Word handling: text or html")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file")] = None,
    ):
    """Convert a batch of files and package the Markdown into one zip archive."""
    configure_logging(verbose=verbose, log_file=log_file)
    settings = _settings(overrides={"output_dir": out, "archive_name": name, "docx_mode": docx_mode})
    converted, failures = _convert_all(path, settings)

    if converted:
        try:
            archive = run_archive(converted, Path(settings.output_dir), settings.archive_name)
        except OSError as e:
            _fail("Writing archive failed", e)
        typer.echo(f"Packaged {len(converted)} document(s) into {archive}")

    _echo_failures(failures)


def preview_cmd(
    path: Annotated[str, typer.Argument(help="File to convert and render")],
    out: Annotated[Optional[str], typer.Option("--out", help="Write HTML here instead of stdout")] = None,
    docx_mode: Annotated[Optional[str], typer.Option("--docx-mode", help="Word handling: text or html")] = None,
    ):
    """Convert a single file and render the Markdown as HTML."""
    configure_logging(quiet=out is None)
    settings = _settings(overrides={"docx_mode": docx_mode})
    source = Path(path)
    if not source.is_file() or not is_supported(source):
        _fail(f"Not a supported file: {path}")

    try:
        doc = convert_file(source, settings)
    except RuntimeError as e:
        _fail(str(e))

    html = render_html(doc.markdown)
    if out:
        Path(out).write_text(html, encoding='utf-8')
        typer.echo(f"  {source} -> {out}")
    else:
        typer.echo(html)


def formats_cmd():
    """List the supported input file extensions."""
    for ext in sorted(SUPPORTED_EXTENSIONS):
        typer.echo(ext)
