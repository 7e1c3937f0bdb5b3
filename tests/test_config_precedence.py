"""Test configuration precedence: CLI > Env > TOML > Defaults."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from id3_reader.cli import app
from id3_reader.config import Config, OutputFormat


@pytest.fixture
def config_file(tmp_path: Path):
    def _write(content: str) -> Path:
        path = tmp_path / "id3-reader.toml"
        path.write_text(content)
        return path

    return _write


def test_toml_loading(config_file):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    """Test that TOML configuration is loaded correctly."""
    config_path = config_file(
        """
output = "json"

[scan]
patterns = ["*.mp3", "*.mp2"]
recursive = false

[logging]
level = "DEBUG"
format = "%(name)s: %(message)s"
hash_paths = true
library_root = "/srv/music"
"""
    )

    config = Config.load(config_path)

    assert config.output == OutputFormat.JSON
    assert config.scan.patterns == ["*.mp3", "*.mp2"]
    assert config.scan.recursive is False
    assert config.logging.level == "DEBUG"
    assert config.logging.format == "%(name)s: %(message)s"
    assert config.logging.hash_paths is True
    assert config.logging.library_root == Path("/srv/music")


def test_env_overrides_toml(config_file, monkeypatch):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    """Test that environment variables override TOML configuration."""
    config_path = config_file(
        """
output = "text"

[scan]
recursive = true

[logging]
level = "ERROR"
"""
    )

    monkeypatch.setenv("ID3_READER_OUTPUT", "json")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_SCAN_RECURSIVE", "false")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_LOGGING_LEVEL", "INFO")  # pyright: ignore[reportUnknownMemberType]

    config = Config.load(config_path)

    assert config.output == OutputFormat.JSON  # from env, not "text" from TOML
    assert config.scan.recursive is False  # from env
    assert config.logging.level == "INFO"  # from env, not "ERROR" from TOML


def test_cli_precedence_over_env_and_toml(config_file, monkeypatch, tagged_file):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    """Test that CLI arguments have highest precedence over env vars and TOML."""
    config_path = config_file('output = "json"\n')
    monkeypatch.setenv("ID3_READER_OUTPUT", "json")  # pyright: ignore[reportUnknownMemberType]

    runner = CliRunner()
    result = runner.invoke(
        app, ["--config", str(config_path), "--output", "text", "show", str(tagged_file)]
    )

    assert result.exit_code == 0
    assert "ID3 Tag Information:" in result.stdout


def test_toml_output_used_without_cli_flag(config_file, tagged_file):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    config_path = config_file('output = "json"\n')

    runner = CliRunner()
    result = runner.invoke(app, ["--config", str(config_path), "show", str(tagged_file)])

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["type"] == "id3v2"


def test_invalid_output_in_toml_rejected(config_file):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    from pydantic import ValidationError

    config_path = config_file('output = "xml"\n')

    with pytest.raises(ValidationError):
        Config.load(config_path)


def test_logging_env_vars(monkeypatch):  # pyright: ignore[reportMissingParameterType,reportUnknownParameterType]
    """Test that logging environment variables work correctly."""
    monkeypatch.setenv("ID3_READER_LOGGING_LEVEL", "DEBUG")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_LOGGING_FORMAT", "%(levelname)s %(message)s")  # pyright: ignore[reportUnknownMemberType]
    monkeypatch.setenv("ID3_READER_LOGGING_HASH_PATHS", "true")  # pyright: ignore[reportUnknownMemberType]

    config = Config.load()

    assert config.logging.level == "DEBUG"
    assert config.logging.format == "%(levelname)s %(message)s"
    assert config.logging.hash_paths is True
