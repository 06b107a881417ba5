"""
Tests for the server runner command line.
"""

import json
import os
from unittest.mock import MagicMock

import pytest
import yaml

from qna import __version__
from qna.scripts import run_server


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.startswith("QNA_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_server.main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_config_prints_resolved_options(capsys, tmp_path, monkeypatch):
    # Arrange
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"server": {"port": 9000}, "cache": {"kind": "redis"}}))
    monkeypatch.setenv("QNA_LOG__LEVEL", "debug")
    uvicorn_run = MagicMock()
    monkeypatch.setattr(run_server.uvicorn, "run", uvicorn_run)

    # Act
    run_server.main(["-c", str(path), "config"])

    # Assert
    printed = json.loads(capsys.readouterr().out)
    assert printed["server"]["port"] == 9000
    assert printed["cache"]["kind"] == "redis"
    assert printed["db"]["kind"] == "in_memory"
    assert printed["log"]["level"] == "DEBUG"
    uvicorn_run.assert_not_called()


def test_run_uses_command_line_overrides(tmp_path, monkeypatch):
    uvicorn_run = MagicMock()
    monkeypatch.setattr(run_server.uvicorn, "run", uvicorn_run)

    run_server.main(["--host", "127.0.0.1", "--port", "8123"])

    _, kwargs = uvicorn_run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8123
    assert kwargs["log_level"] == "info"


def test_bad_config_exits(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("a = 1")

    with pytest.raises(SystemExit) as exc_info:
        run_server.main(["-c", str(path)])

    assert exc_info.value.code == 1
