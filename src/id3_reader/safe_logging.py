"""PII-safe logging utilities for id3-reader.

Log records routinely carry the paths of the files being read. The formatter
here shortens them (or hashes them) so logs do not leak a user's directory
layout:
- File path hashing/relativization
- Rich console handler setup for the CLI
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def hash_path(file_path: Path | str, length: int = 12) -> str:
    """Hash a file path for logging.

    Creates a deterministic, non-reversible hash of the full path.

    Args:
        file_path: Path to hash
        length: Length of hash to return

    Returns:
        Truncated SHA256 hash of the path
    """
    path_str = str(file_path)
    return hashlib.sha256(path_str.encode()).hexdigest()[:length]


def relativize_path(file_path: Path | str, library_root: Path | str | None = None) -> str:
    """Convert path to relative form for safe logging.

    If library_root is provided, returns path relative to it.
    Otherwise, returns just the filename with parent directory.
    """
    path = Path(file_path)

    if library_root:
        root = Path(library_root)
        try:
            return str(path.relative_to(root))
        except ValueError:
            pass

    if path.parent.name:
        return f"{path.parent.name}/{path.name}"
    return path.name


def safe_path(
    file_path: Path | str,
    library_root: Path | str | None = None,
    use_hash: bool = False,
) -> str:
    """Get a safe representation of a path for logging."""
    if use_hash:
        return f"file:{hash_path(file_path)}"
    return relativize_path(file_path, library_root)


class SafeLogFormatter(logging.Formatter):
    """Log formatter that shortens or hashes file paths in record arguments."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        hash_paths: bool = False,
        library_root: Path | None = None,
    ):
        super().__init__(fmt, datefmt)
        self.hash_paths = hash_paths
        self._library_root = library_root

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy; other handlers may format the same record
        record = logging.makeLogRecord(record.__dict__)

        if record.args:
            record.args = self._sanitize_args(record.args)

        return super().format(record)

    def _sanitize_args(self, args: tuple[Any, ...] | Mapping[str, Any]) -> tuple[Any, ...]:
        if isinstance(args, Mapping):
            return tuple(self._sanitize_value(v) for v in args.values())
        return tuple(self._sanitize_value(arg) for arg in args)

    def _sanitize_value(self, value: Any) -> Any:
        if isinstance(value, Path):
            return safe_path(value, self._library_root, use_hash=self.hash_paths)
        return value


def configure_rich_logging(
    level: int = logging.WARNING,
    format_string: str = "%(message)s",
    hash_paths: bool = False,
    library_root: Path | None = None,
    show_time: bool = True,
    show_path: bool = False,
) -> Console:
    """Route logging to stderr through Rich and return a console for stdout.

    Replaces any RichHandler installed by an earlier call.

    Args:
        level: Logging level for the root logger
        format_string: Format for the message part of each record
        hash_paths: Whether to hash file paths instead of shortening them
        library_root: Directory that shortened paths are made relative to
        show_time: Show timestamps in log lines
        show_path: Show the emitting module path in log lines

    Returns:
        Console to use for regular command output
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=show_time,
        show_path=show_path,
        markup=False,
    )
    handler.setFormatter(
        SafeLogFormatter(fmt=format_string, hash_paths=hash_paths, library_root=library_root)
    )

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if isinstance(h, RichHandler)]:
        root_logger.removeHandler(existing)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    return Console()


## Tests


def test_hash_path():
    """Test path hashing."""
    path1 = Path("/home/user/music/song.mp3")
    path2 = Path("/home/user/music/song.mp3")
    path3 = Path("/home/user/music/other.mp3")

    assert len(hash_path(path1)) == 12
    assert hash_path(path1) == hash_path(path2)
    assert hash_path(path1) != hash_path(path3)


def test_relativize_path():
    """Test path relativization."""
    path = Path("/home/user/music/artist/album/song.mp3")

    assert relativize_path(path, "/home/user/music") == "artist/album/song.mp3"
    assert relativize_path(path) == "album/song.mp3"


def test_safe_log_formatter_shortens_paths():
    """Test SafeLogFormatter."""
    formatter = SafeLogFormatter(fmt="%(message)s")

    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="No ID3 tags found in %s",
        args=(Path("/home/user/music/album/song.mp3"),),
        exc_info=None,
    )

    formatted = formatter.format(record)
    assert formatted == "No ID3 tags found in album/song.mp3"


def test_safe_log_formatter_uses_library_root():
    formatter = SafeLogFormatter(fmt="%(message)s", library_root=Path("/home/user/music"))

    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="No ID3 tags found in %s",
        args=(Path("/home/user/music/artist/album/song.mp3"),),
        exc_info=None,
    )

    assert formatter.format(record) == "No ID3 tags found in artist/album/song.mp3"
