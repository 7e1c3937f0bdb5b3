"""CLI for id3-reader using Typer and Rich.

Reads ID3v1 and ID3v2 tags from MP3 files and prints them as text or JSON.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from id3_reader.config import Config, OutputFormat, ScanConfig
from id3_reader.console import (
    print as cprint,
)
from id3_reader.console import (
    print_error,
    print_plain,
    print_warning,
    set_console,
)
from id3_reader.exceptions import ID3ReaderError
from id3_reader.models import TagResult
from id3_reader.render import render_text, result_to_dict
from id3_reader.resolver import TagReader
from id3_reader.safe_logging import configure_rich_logging


class ExitCode:
    """Standard exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    NO_RESULTS = 2


app = typer.Typer(
    name="id3-reader",
    help="Read ID3v1 and ID3v2 tags from MP3 files",
    no_args_is_help=True,
    add_completion=False,
)


class AppState:
    """Global application state passed between commands."""

    config: Config
    output_format: OutputFormat
    verbose: int


state = AppState()


def _collect_audio_files(paths: list[Path], scan: ScanConfig) -> list[Path]:
    """Collect audio files from paths (files or directories).

    Directories are searched for the configured patterns; explicit file
    paths are passed through untouched so validation can report them.
    """
    audio_files: list[Path] = []
    for path in paths:
        if path.is_dir():
            found: set[Path] = set()
            for pattern in scan.patterns:
                found.update(path.rglob(pattern) if scan.recursive else path.glob(pattern))
            audio_files.extend(sorted(p for p in found if p.is_file()))
        else:
            audio_files.append(path)
    return audio_files


def _read_all(files: list[Path]) -> list[tuple[Path, TagResult | None, str | None]]:
    """Read every file, collecting fatal errors instead of stopping."""
    logger = logging.getLogger(__name__)
    results: list[tuple[Path, TagResult | None, str | None]] = []
    for path in files:
        try:
            results.append((path, TagReader(path).read_tags(), None))
        except (ID3ReaderError, OSError) as e:
            logger.debug("Failed to read %s", path, exc_info=True)
            results.append((path, None, str(e)))
    return results


def _display_title_artist(result: TagResult) -> tuple[str, str]:
    """Title and artist from ID3v2 text frames, falling back to ID3v1."""
    title = artist = ""
    if result.v2 is not None:
        title = result.v2.frames.get("TIT2", "")
        artist = result.v2.frames.get("TPE1", "")
    if result.v1 is not None:
        title = title or result.v1.title
        artist = artist or result.v1.artist
    return title, artist


@app.callback()
def main(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to configuration TOML file", exists=True),
    ] = None,
    output: Annotated[
        OutputFormat | None,
        typer.Option("--output", "-o", help="Output format"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase verbosity"),
    ] = 0,
) -> None:
    """id3-reader: inspect the ID3 tags embedded in MP3 files."""
    logger = logging.getLogger(__name__)

    # Load config (TOML + env vars)
    cfg = Config.load(config_path)

    # CLI > Env > Config File > Defaults
    if output is not None:
        cfg.output = output

    if verbose > 0:
        log_level = logging.DEBUG if verbose >= 2 else logging.INFO
    else:
        level_str = cfg.logging.level.upper()
        log_level = getattr(logging, level_str, logging.WARNING)

    console = configure_rich_logging(
        level=log_level,
        format_string=cfg.logging.format,
        hash_paths=cfg.logging.hash_paths,
        library_root=cfg.logging.library_root,
        show_time=True,
        show_path=False,
    )
    set_console(console)

    if config_path:
        logger.info("Loaded config from %s", config_path)
    logger.debug(
        "Logging configured: level=%s, hash_paths=%s",
        logging.getLevelName(log_level),
        cfg.logging.hash_paths,
    )

    state.config = cfg
    state.output_format = cfg.output
    state.verbose = verbose


@app.command()
def show(
    paths: Annotated[
        list[Path],
        typer.Argument(help="MP3 files or directories to read"),
    ],
) -> None:
    """Print every decoded ID3 field of each file.

    Examples:
        id3-reader show song.mp3
        id3-reader -o json show /music/album/
    """
    files = _collect_audio_files(paths, state.config.scan)
    if not files:
        print_warning("No audio files found")
        sys.exit(ExitCode.NO_RESULTS)

    results = _read_all(files)

    if state.output_format == OutputFormat.JSON:
        entries: list[dict[str, Any]] = []
        for path, result, error in results:
            entry: dict[str, Any] = {"path": str(path)}
            if result is not None:
                entry.update(result_to_dict(result))
            else:
                entry["error"] = error
            entries.append(entry)
        print_plain(json.dumps(entries, indent=2, ensure_ascii=False))
    else:
        for path, result, error in results:
            if len(results) > 1:
                cprint(f"\n[bold]{escape(str(path))}[/bold]", highlight=False)
            if result is not None:
                print_plain(render_text(result))
            else:
                print_error(error or "unknown error")

    failed = any(error is not None for _, _, error in results)
    sys.exit(ExitCode.ERROR if failed else ExitCode.SUCCESS)


@app.command()
def summary(
    paths: Annotated[
        list[Path],
        typer.Argument(help="MP3 files or directories to summarise"),
    ],
) -> None:
    """Show one line per file: tag type, version, title and artist.

    Exits with code 2 when none of the files carries an ID3 tag.
    """
    files = _collect_audio_files(paths, state.config.scan)
    results = _read_all(files)

    if state.output_format == OutputFormat.JSON:
        rows: list[dict[str, Any]] = []
        for path, result, error in results:
            if result is None:
                rows.append({"path": str(path), "error": error})
                continue
            title, artist = _display_title_artist(result)
            rows.append(
                {
                    "path": str(path),
                    "type": result.type.value,
                    "version": result.v2.version if result.v2 is not None else None,
                    "title": title,
                    "artist": artist,
                }
            )
        print_plain(json.dumps(rows, indent=2, ensure_ascii=False))
    else:
        table = Table(title="ID3 tags")
        table.add_column("File")
        table.add_column("Type")
        table.add_column("Version")
        table.add_column("Title")
        table.add_column("Artist")
        for path, result, error in results:
            if result is None:
                table.add_row(
                    Text(str(path)), Text("error", style="red"), "", Text(error or ""), ""
                )
                continue
            title, artist = _display_title_artist(result)
            version = result.v2.version if result.v2 is not None else ""
            table.add_row(Text(str(path)), result.type.value, version, Text(title), Text(artist))
        cprint(table)

    if any(error is not None for _, _, error in results):
        sys.exit(ExitCode.ERROR)
    if not any(result is not None and result.has_tags for _, result, _ in results):
        sys.exit(ExitCode.NO_RESULTS)
    sys.exit(ExitCode.SUCCESS)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
