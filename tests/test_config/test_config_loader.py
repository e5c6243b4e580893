"""
Tests for configuration loading from files and environment variables.
"""

import json

import pytest
import yaml

from resource_fetch.config import ConfigLoader, ConfigLoadError, GlobalConfig, LogLevel


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RESOURCE_FETCH_* variables inherited from the test runner."""
    for suffix in ConfigLoader.ENV_MAPPINGS:
        monkeypatch.delenv(f"RESOURCE_FETCH_{suffix}", raising=False)
    return monkeypatch


@pytest.fixture
def loader(tmp_path, clean_env):
    """ConfigLoader whose default search paths all live under tmp_path."""
    loader = ConfigLoader()
    loader.config_paths = [
        tmp_path / "resource_fetch.yaml",
        tmp_path / "resource_fetch.json",
    ]
    return loader


class TestConfigFiles:
    """Test loading configuration files."""

    def test_defaults_without_sources(self, loader):
        config = loader.load_config()

        assert config == GlobalConfig()

    def test_yaml_file(self, loader, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "http": {"total_timeout": 12.5, "verify_ssl": False},
                    "ftp": {"anonymous_user": "guest"},
                    "logging": {"level": "DEBUG"},
                }
            )
        )

        config = loader.load_config(path)

        assert config.http.total_timeout == 12.5
        assert config.http.verify_ssl is False
        assert config.ftp.anonymous_user == "guest"
        assert config.logging.level is LogLevel.DEBUG

    def test_json_file(self, loader, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"features": {"enable_ftp": False}}))

        config = loader.load_config(str(path))

        assert config.features.enable_ftp is False

    def test_default_search_path(self, loader, tmp_path):
        (tmp_path / "resource_fetch.json").write_text(
            json.dumps({"http": {"max_redirects": 2}})
        )

        assert loader.load_config().http.max_redirects == 2

    def test_empty_yaml_file(self, loader, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert loader.load_config(path) == GlobalConfig()

    def test_missing_explicit_file(self, loader, tmp_path):
        with pytest.raises(ConfigLoadError, match="not found"):
            loader.load_config(tmp_path / "nope.yaml")

    def test_unsupported_extension(self, loader, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text("[http]\n")

        with pytest.raises(ConfigLoadError, match="Unsupported config file format"):
            loader.load_config(path)

    def test_malformed_json(self, loader, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ConfigLoadError, match="Failed to parse"):
            loader.load_config(path)

    def test_malformed_yaml(self, loader, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("http: [unclosed\n")

        with pytest.raises(ConfigLoadError, match="Failed to parse"):
            loader.load_config(path)

    def test_non_mapping_file(self, loader, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigLoadError, match="mapping"):
            loader.load_config(path)

    def test_invalid_values(self, loader, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"http": {"total_timeout": -1}}))

        with pytest.raises(ConfigLoadError, match="Invalid configuration"):
            loader.load_config(path)

    def test_unknown_section(self, loader, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"cache": {"enabled": True}}))

        with pytest.raises(ConfigLoadError):
            loader.load_config(path)


class TestEnvironmentConfig:
    """Test environment variable overrides."""

    def test_environment_values(self, loader, clean_env):
        clean_env.setenv("RESOURCE_FETCH_HTTP_TIMEOUT", "15")
        clean_env.setenv("RESOURCE_FETCH_FTP_TIMEOUT", "2.5")
        clean_env.setenv("RESOURCE_FETCH_VERIFY_SSL", "false")
        clean_env.setenv("RESOURCE_FETCH_ENABLE_FTP", "no")
        clean_env.setenv("RESOURCE_FETCH_LOG_LEVEL", "ERROR")

        config = loader.load_config()

        assert config.http.total_timeout == 15
        assert config.ftp.socket_timeout == 2.5
        assert config.http.verify_ssl is False
        assert config.features.enable_ftp is False
        assert config.logging.level is LogLevel.ERROR

    def test_string_keys_not_converted(self, loader, clean_env):
        clean_env.setenv("RESOURCE_FETCH_FTP_ANONYMOUS_USER", "1234")

        assert loader.load_config().ftp.anonymous_user == "1234"

    def test_environment_overrides_file(self, loader, tmp_path, clean_env):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"http": {"total_timeout": 10, "max_redirects": 4}}))
        clean_env.setenv("RESOURCE_FETCH_HTTP_TIMEOUT", "20")

        config = loader.load_config(path)

        assert config.http.total_timeout == 20
        assert config.http.max_redirects == 4

    def test_custom_prefix(self, tmp_path, clean_env):
        clean_env.setenv("MYAPP_MAX_REDIRECTS", "1")
        loader = ConfigLoader(env_prefix="MYAPP_")
        loader.config_paths = []

        assert loader.load_config().http.max_redirects == 1

    def test_invalid_environment_value(self, loader, clean_env):
        clean_env.setenv("RESOURCE_FETCH_MAX_REDIRECTS", "many")

        with pytest.raises(ConfigLoadError):
            loader.load_config()

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("42", 42),
            ("0.5", 0.5),
            ("true", True),
            ("On", True),
            ("off", False),
            ("text", "text"),
        ],
    )
    def test_convert_env_value(self, raw, expected):
        assert ConfigLoader()._convert_env_value(raw) == expected
