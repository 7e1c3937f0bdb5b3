from __future__ import annotations

import os
import tomllib
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(StrEnum):
    """Output format for CLI commands."""

    TEXT = "text"
    JSON = "json"


class ScanConfig(BaseModel):
    """Which files to pick up when a directory is given."""

    patterns: list[str] = Field(default_factory=lambda: ["*.mp3"])
    recursive: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING")  # DEBUG, INFO, WARNING, ERROR
    format: str = Field(default="%(message)s")
    hash_paths: bool = Field(default=False)
    # Paths under this directory are logged relative to it
    library_root: Path | None = Field(default=None)


class Config(BaseModel):
    """
    Main configuration for id3-reader.

    Loads from TOML file with optional environment variable overrides.
    """

    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputFormat = Field(default=OutputFormat.TEXT)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """
        Load configuration from TOML file with environment variable overrides.

        Environment variables take precedence and follow the pattern:
        ID3_READER_<SECTION>_<KEY> (e.g., ID3_READER_LOGGING_LEVEL)

        All values are gathered into a single dictionary first, then validated
        by Pydantic to ensure consistent type checking and coercion.
        """
        config_dict: dict[str, object] = {}

        if config_path and config_path.exists():
            config_dict = tomllib.loads(config_path.read_text())

        config_dict = cls._merge_env_overrides(config_dict)
        return cls.model_validate(config_dict)

    @classmethod
    def _merge_env_overrides(cls, config_dict: dict[str, object]) -> dict[str, object]:
        """
        Merge environment variable overrides into config dictionary.

        Returns a new dictionary with env vars applied, ready for Pydantic validation.
        """
        env_prefix = "ID3_READER_"

        if output := os.getenv(f"{env_prefix}OUTPUT"):
            config_dict["output"] = output.lower()

        scan = config_dict.setdefault("scan", {})
        if not isinstance(scan, dict):
            scan = {}
            config_dict["scan"] = scan

        if patterns := os.getenv(f"{env_prefix}SCAN_PATTERNS"):
            scan["patterns"] = [p.strip() for p in patterns.split(",") if p.strip()]
        if recursive := os.getenv(f"{env_prefix}SCAN_RECURSIVE"):
            scan["recursive"] = recursive.lower() in ("true", "1", "yes")

        logging_config = config_dict.setdefault("logging", {})
        if not isinstance(logging_config, dict):
            logging_config = {}
            config_dict["logging"] = logging_config

        if log_level := os.getenv(f"{env_prefix}LOGGING_LEVEL"):
            logging_config["level"] = log_level
        if log_format := os.getenv(f"{env_prefix}LOGGING_FORMAT"):
            logging_config["format"] = log_format
        if log_hash_paths := os.getenv(f"{env_prefix}LOGGING_HASH_PATHS"):
            logging_config["hash_paths"] = log_hash_paths.lower() in ("true", "1", "yes")
        if library_root := os.getenv(f"{env_prefix}LOGGING_LIBRARY_ROOT"):
            logging_config["library_root"] = library_root

        return config_dict


## Tests


def test_config_defaults():
    config = Config()
    assert config.output == OutputFormat.TEXT
    assert config.scan.patterns == ["*.mp3"]
    assert config.scan.recursive is True
    assert config.logging.level == "WARNING"
    assert config.logging.hash_paths is False


def test_config_from_dict():
    config = Config.model_validate(
        {
            "output": "json",
            "scan": {"patterns": ["*.mp3", "*.mp2"], "recursive": False},
        }
    )
    assert config.output == OutputFormat.JSON
    assert config.scan.patterns == ["*.mp3", "*.mp2"]
    assert config.scan.recursive is False


def test_config_env_overrides(
    monkeypatch,  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
):
    monkeypatch.setenv("ID3_READER_OUTPUT", "JSON")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_SCAN_PATTERNS", "*.mp3, *.MP3")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_LOGGING_HASH_PATHS", "yes")  # pyright: ignore[reportUnknownMemberType]

    config = Config.load()
    assert config.output == OutputFormat.JSON
    assert config.scan.patterns == ["*.mp3", "*.MP3"]
    assert config.logging.hash_paths is True


def test_config_load_nonexistent_file():
    config = Config.load(Path("/nonexistent/config.toml"))
    assert config.output == OutputFormat.TEXT
    assert config.scan.recursive is True


def test_config_library_root_from_env(
    monkeypatch,  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
):
    monkeypatch.setenv("ID3_READER_LOGGING_LIBRARY_ROOT", "/srv/music")  # pyright: ignore[reportUnknownMemberType]

    config = Config.load()
    assert config.logging.library_root == Path("/srv/music")
    assert Config().logging.library_root is None
