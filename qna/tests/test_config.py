"""
Tests for configuration loading.
"""

import json
import os

import pytest
import yaml

from qna.common.exceptions import ConfigurationError
from qna.config import (
    AppConfig,
    ConfigLoader,
    InMemoryDatabaseConfig,
    InProcessCacheConfig,
    PostgresDatabaseConfig,
    RedisCacheConfig,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and .env out of the tests."""
    for name in list(os.environ):
        if name.startswith("QNA_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return str(path)


def test_defaults():
    config = load_config([])

    assert isinstance(config.db, InMemoryDatabaseConfig)
    assert isinstance(config.cache, InProcessCacheConfig)
    assert config.log.level == "INFO"
    assert config.server.port == 8000
    assert config.answer.cache_ttl_seconds == 3600


def test_yaml_file_selects_backends(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {
        "db": {"kind": "postgres", "url": "postgresql://u:p@db/qna", "max_size": 4},
        "cache": {"kind": "redis", "host": "redis", "password": "secret"},
    })

    config = load_config([path])

    assert isinstance(config.db, PostgresDatabaseConfig)
    assert config.db.max_size == 4
    assert config.db.pool_timeout == 5.0
    assert isinstance(config.cache, RedisCacheConfig)
    assert config.cache.host == "redis"
    assert config.cache.password == "secret"


def test_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"service_name": "questions", "server": {"port": 9000}}))

    config = load_config([str(path)])

    assert config.service_name == "questions"
    assert config.server.port == 9000


def test_glob_files_merge_in_order(tmp_path):
    write_yaml(tmp_path / "10-base.yaml", {"server": {"host": "127.0.0.1", "port": 1}})
    write_yaml(tmp_path / "20-override.yaml", {"server": {"port": 2}})

    config = load_config([str(tmp_path / "*.yaml")])

    assert config.server.host == "127.0.0.1"
    assert config.server.port == 2


def test_environment_overrides_files(tmp_path, monkeypatch):
    path = write_yaml(tmp_path / "config.yaml", {"log": {"level": "DEBUG"}})
    monkeypatch.setenv("QNA_LOG__LEVEL", "error")
    monkeypatch.setenv("QNA_DB__KIND", "postgres")

    config = load_config([path])

    assert config.log.level == "ERROR"
    assert isinstance(config.db, PostgresDatabaseConfig)


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_yaml(tmp_path / "service.yml", {"service_name": "from-env"})
    monkeypatch.setenv("QNA_CONFIG_PATH", path)

    assert ConfigLoader().load().service_name == "from-env"


def test_invalid_log_level_raises(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {"log": {"level": "LOUD"}})

    with pytest.raises(ConfigurationError):
        load_config([path])


def test_unknown_backend_kind_raises(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {"db": {"kind": "mongo"}})

    with pytest.raises(ConfigurationError):
        load_config([path])


def test_unsupported_suffix_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("a = 1")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config([str(path)])

    assert exc_info.value.config_key == str(path)


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigurationError):
        load_config([str(path)])


def test_missing_file_is_skipped(tmp_path):
    config = load_config([str(tmp_path / "missing.yaml")])

    assert config == AppConfig()


def test_loader_caches_result(tmp_path):
    loader = ConfigLoader([write_yaml(tmp_path / "config.yaml", {"service_name": "a"})])

    assert loader.load() is loader.load()
