from __future__ import annotations

from pathlib import Path

import pytest

from btconnect.core import config
from btconnect.core.config import load_settings
from btconnect.core.errors import ConfigError
from btconnect.core.model import Settings


def _write_config(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_default_file_gives_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "default_config_path", lambda: tmp_path / "nope" / "config.yaml")
    assert load_settings() == Settings()


def test_default_file_is_read(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = _write_config(tmp_path / "btconnect" / "config.yaml", "fuzzy_threshold: 0.8\n")
    monkeypatch.setattr(config, "default_config_path", lambda: path)
    assert load_settings().fuzzy_threshold == 0.8


def test_explicit_file_overrides_values(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path / "config.yaml",
        """
executable: /opt/homebrew/bin/blueutil
audio_command: ["SwitchAudioSource", "-c"]
fuzzy_threshold: 0.75
color: false
""",
    )
    settings = load_settings(path)
    assert settings.executable == "/opt/homebrew/bin/blueutil"
    assert settings.audio_command == ("SwitchAudioSource", "-c")
    assert settings.fuzzy_threshold == 0.75
    assert settings.color is False


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "")
    assert load_settings(path) == Settings()


def test_missing_explicit_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.yaml")


def test_unknown_key_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "colour: true\n")
    with pytest.raises(ConfigError) as exc:
        load_settings(path)
    assert "Schema validation failed" in str(exc.value)


def test_threshold_out_of_range_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "fuzzy_threshold: 1.5\n")
    with pytest.raises(ConfigError) as exc:
        load_settings(path)
    assert "fuzzy_threshold" in str(exc.value)


def test_duplicate_yaml_keys_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "color: true\ncolor: false\n")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_non_mapping_root_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "- blueutil\n")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_invalid_yaml_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "config.yaml", "executable: [unterminated\n")
    with pytest.raises(ConfigError):
        load_settings(path)
