"""Tests for application settings."""

from pathlib import Path

import pytest

from ddr_autoblob.infrastructure.config import Config


@pytest.mark.unit
def test_config_defaults() -> None:
    """Test settings without environment or .env file."""
    config = Config.from_env()

    assert config.override_file is None
    assert config.log_dir is None
    assert config.verbose is False
    assert isinstance(config.config_file, Path), "Config path should be Path object"


@pytest.mark.unit
def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings are read from AUTOBLOB_* variables."""
    monkeypatch.setenv("AUTOBLOB_CONFIG_FILE", "j9.properties")
    monkeypatch.setenv("AUTOBLOB_OUTPUT_FILE", "autoblob.c")
    monkeypatch.setenv("AUTOBLOB_LOG_DIR", "logs")
    monkeypatch.setenv("AUTOBLOB_VERBOSE", "yes")

    config = Config.from_env()

    assert config.config_file == Path("j9.properties")
    assert config.output_file == Path("autoblob.c")
    assert config.log_dir == Path("logs")
    assert config.verbose is True


@pytest.mark.unit
def test_config_env_file_loading(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test a .env file in the working directory is honoured."""
    (tmp_path / ".env").write_text(
        "AUTOBLOB_OVERRIDE_FILE=override.properties\nAUTOBLOB_VERBOSE=true\n",
        encoding="utf-8",
    )
    # load_dotenv writes into os.environ; make sure the values are undone afterwards
    monkeypatch.setenv("AUTOBLOB_OVERRIDE_FILE", "")
    monkeypatch.delenv("AUTOBLOB_OVERRIDE_FILE")
    monkeypatch.setenv("AUTOBLOB_VERBOSE", "")
    monkeypatch.delenv("AUTOBLOB_VERBOSE")

    config = Config.from_env()

    assert config.override_file == Path("override.properties")
    assert config.verbose is True


@pytest.mark.unit
def test_config_from_args_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test explicit arguments win over the environment."""
    monkeypatch.setenv("AUTOBLOB_VERBOSE", "false")
    monkeypatch.setenv("AUTOBLOB_CONFIG_FILE", "env.properties")

    config = Config.from_args(config_file=Path("cli.properties"), verbose=True)

    assert config.config_file == Path("cli.properties")
    assert config.verbose is True


@pytest.mark.unit
def test_config_validation(j9_config_file: Path, tmp_path: Path) -> None:
    """Test validation accepts an existing file and rejects missing ones."""
    Config(config_file=j9_config_file, output_file=tmp_path / "out.c").validate()

    missing = Config(config_file=tmp_path / "missing.properties", output_file=tmp_path / "out.c")
    with pytest.raises(ValueError, match="does not exist"):
        missing.validate()

    bad_override = Config(
        config_file=j9_config_file,
        output_file=tmp_path / "out.c",
        override_file=tmp_path / "missing.properties",
    )
    with pytest.raises(ValueError, match="override file"):
        bad_override.validate()
