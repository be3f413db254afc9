"""Tests for configuration loading."""

from pathlib import Path

import msgspec
import pytest
from pydantic import ValidationError

from torrentview import config


class TestInitConfig:
    """Tests for init_config."""

    def test_defaults(self) -> None:
        """Should provide an empty profile and enabled notifications."""
        cfg = config.init_config()

        assert cfg.profile.excluded_fields == []
        assert cfg.notification.notification_urls == []
        assert cfg.notification.notify_on_finish is True
        assert cfg.notification.notify_on_error is True

    def test_installs_global_config(self) -> None:
        """Should replace the module-level cfg."""
        cfg = config.init_config({"profile": {"excluded_fields": ["comment"]}})

        assert config.cfg is cfg
        assert config.cfg.profile.excluded_fields == ["comment"]

    def test_rejects_invalid_types(self) -> None:
        """Should raise on values that do not match the schema."""
        with pytest.raises(ValidationError):
            config.init_config({"notification": {"notify_on_finish": "maybe"}})


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_toml(self, tmp_path: Path) -> None:
        """Should read profile and notification tables from TOML."""
        path = tmp_path / "torrentview.toml"
        path.write_text(
            "[profile]\n"
            'excluded_fields = ["freeDiskSpace", "comment"]\n'
            "\n"
            "[notification]\n"
            'notification_urls = ["json://localhost:8080/notify"]\n'
            "notify_on_error = false\n"
        )

        cfg = config.load_config(path)

        assert cfg.profile.excluded_fields == ["freeDiskSpace", "comment"]
        assert cfg.notification.notification_urls == [
            "json://localhost:8080/notify"
        ]
        assert cfg.notification.notify_on_error is False
        assert config.cfg is cfg

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should raise a decode error for malformed TOML."""
        path = tmp_path / "broken.toml"
        path.write_text("[profile\n")

        with pytest.raises(msgspec.DecodeError):
            config.load_config(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise when the file does not exist."""
        with pytest.raises(OSError):
            config.load_config(tmp_path / "missing.toml")
