"""Tests for registry configuration loading."""

from datetime import timedelta

import pytest

from secretlease import ConfigError, LeaseConfig, load_config


class TestLeaseConfig:
    def test_defaults(self):
        config = LeaseConfig()
        assert config.max_default_duration is None
        assert config.max_default_grace_period is None
        assert config.allow_replace is False


class TestLoadConfig:
    def test_load_seconds(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text("max_default_duration: 3600\nmax_default_grace_period: 300\nallow_replace: true\n")
        config = load_config(path)
        assert config.max_default_duration == timedelta(hours=1)
        assert config.max_default_grace_period == timedelta(minutes=5)
        assert config.allow_replace is True

    def test_load_iso_duration(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text('max_default_duration: "P1D"\n')
        assert load_config(str(path)).max_default_duration == timedelta(days=1)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text("")
        assert load_config(path) == LeaseConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text("max_default_duration: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "lease.yaml"
        path.write_text("max_default_duration: forever\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)
