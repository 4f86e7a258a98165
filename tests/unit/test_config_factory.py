"""Tests for configuration factory and loading."""

import os

import pytest

from graph_list_kit import (
    ConfigFactory,
    ConfigProvider,
    ConfigurationError,
    GraphConfig,
    create_config,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove GRAPH_LIST_ variables leaking in from the host."""
    for key in list(os.environ.keys()):
        if key.startswith("GRAPH_LIST_"):
            monkeypatch.delenv(key, raising=False)


class TestGraphConfig:
    """Tests for GraphConfig defaults and validation."""

    def test_defaults(self):
        config = GraphConfig()

        assert config.get_graph_base_url() == "https://graph.microsoft.com/v1.0"
        assert config.get_authority_url() == "https://login.microsoftonline.com"
        assert config.timeout == 30.0
        assert config.max_connections == 100
        assert config.verify_ssl is True
        assert config.page_limit == 50
        assert config.max_concurrency is None
        assert config.strict_classification is False

    def test_strips_trailing_slash(self):
        config = GraphConfig(
            graph_base_url="https://graph.test/v1.0/", authority_url="https://login.test/"
        )

        assert config.graph_base_url == "https://graph.test/v1.0"
        assert config.authority_url == "https://login.test"

    def test_satisfies_config_provider(self):
        assert isinstance(GraphConfig(), ConfigProvider)


class TestConfigFactory:
    """Test ConfigFactory methods."""

    def test_create_with_all_params(self):
        config = ConfigFactory.create(
            graph_base_url="https://graph.test/beta",
            timeout=60.0,
            max_connections=50,
            page_limit=5,
            max_concurrency=4,
            strict_classification=True,
            verify_ssl=False,
        )

        assert config.graph_base_url == "https://graph.test/beta"
        assert config.timeout == 60.0
        assert config.max_connections == 50
        assert config.page_limit == 5
        assert config.max_concurrency == 4
        assert config.strict_classification is True
        assert config.verify_ssl is False

    @pytest.mark.parametrize(
        "bad",
        [{"timeout": -10}, {"page_limit": 0}, {"max_connections": 0}, {"max_concurrency": 0}],
    )
    def test_create_validation_error(self, bad):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigFactory.create(**bad)

    def test_from_dict(self):
        config = ConfigFactory.from_dict({"timeout": 45.0, "page_limit": 10})

        assert config.timeout == 45.0
        assert config.page_limit == 10

    def test_from_environment_only(self, monkeypatch):
        monkeypatch.setenv("GRAPH_LIST_GRAPH_BASE_URL", "https://env.example.com/v1.0")
        monkeypatch.setenv("GRAPH_LIST_TIMEOUT", "45.0")
        monkeypatch.setenv("GRAPH_LIST_PAGE_LIMIT", "7")

        config = ConfigFactory.from_environment_only()

        assert config.graph_base_url == "https://env.example.com/v1.0"
        assert config.timeout == 45.0
        assert config.page_limit == 7

    def test_from_environment_invalid_value(self, monkeypatch):
        monkeypatch.setenv("GRAPH_LIST_TIMEOUT", "not-a-number")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigFactory.from_environment_only()

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GRAPH_LIST_TIMEOUT=50.0\nGRAPH_LIST_MAX_CONCURRENCY=8\n")

        config = ConfigFactory.from_env_file(env_file)

        assert config.timeout == 50.0
        assert config.max_concurrency == 8

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GRAPH_LIST_TIMEOUT=40.0\n")
        monkeypatch.setenv("GRAPH_LIST_TIMEOUT", "50.0")

        config = ConfigFactory.from_env_file(env_file, required=True)

        assert config.timeout == 50.0

    def test_from_env_file_not_found_required(self):
        with pytest.raises(ConfigurationError, match=".env file not found"):
            ConfigFactory.from_env_file("/nonexistent/.env", required=True)

    def test_from_env_file_not_found_optional(self, monkeypatch):
        monkeypatch.setenv("GRAPH_LIST_PAGE_LIMIT", "3")

        config = ConfigFactory.from_env_file("/nonexistent/.env", required=False)

        assert config.page_limit == 3

    def test_from_env_with_search_paths(self, tmp_path):
        env_dir = tmp_path / "config"
        env_dir.mkdir()
        env_file = env_dir / ".env"
        env_file.write_text("GRAPH_LIST_PAGE_LIMIT=12\n")

        config = ConfigFactory.from_env(
            search_paths=[str(tmp_path / "nonexistent" / ".env"), str(env_file)]
        )

        assert config.page_limit == 12

    def test_from_env_no_file_found_required(self):
        with pytest.raises(ConfigurationError, match="No .env file found"):
            ConfigFactory.from_env(search_paths=["/nonexistent1/.env"], required=True)

    def test_merge_later_configs_win(self):
        base = ConfigFactory.create(timeout=30.0, page_limit=10)
        override = ConfigFactory.from_dict({"timeout": 60.0, "max_concurrency": 5})

        merged = ConfigFactory.merge(base, override)

        assert merged.timeout == 60.0
        assert merged.page_limit == 10
        assert merged.max_concurrency == 5

    def test_merge_with_base(self):
        base = ConfigFactory.create(page_limit=10)

        merged = ConfigFactory.merge(
            ConfigFactory.from_dict({"timeout": 45.0}),
            ConfigFactory.from_dict({"timeout": 60.0}),
            base=base,
        )

        assert merged.timeout == 60.0
        assert merged.page_limit == 10

    def test_merge_no_configs_raises(self):
        with pytest.raises(ValueError, match="At least one config"):
            ConfigFactory.merge()


class TestConvenienceFunctions:
    """Test convenience functions."""

    def test_load_config_with_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GRAPH_LIST_STRICT_CLASSIFICATION=true\n")

        config = load_config(env_file)

        assert config.strict_classification is True

    def test_load_config_default_search(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("GRAPH_LIST_PAGE_LIMIT=4\n")

        assert load_config().page_limit == 4

    def test_load_config_required(self):
        with pytest.raises(ConfigurationError):
            load_config("/nonexistent/.env", required=True)

    def test_create_config(self):
        assert create_config(timeout=45.0).timeout == 45.0
