"""Tests for configuration loading and saving."""
import pytest
import tomli
from pathlib import Path

from commitgate.config import (
    DEFAULT_CONFIG_FILENAME,
    CommitMessageConfig,
    Config,
    ConfigValidationError,
)
from commitgate.models import ScopeRequirement


def test_default_config(mock_environment):
    config = Config()

    assert config.commit_message.max_line_length == 120
    assert config.commit_message.min_body_length == 20
    assert config.commit_message.min_body_length_type_excludes == ["docs"]
    assert config.commit_message.types["feat"].scope == ScopeRequirement.REQUIRED
    assert config.pull_request.required_statuses is None
    assert config.caretaker is None
    assert config.github is None
    assert not config.always_log
    assert config.log_file is None


def test_load_missing_file(tmp_path, mock_environment):
    assert Config.load(tmp_path) == Config()


def test_load_config_file(tmp_path, mock_environment):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        """
log_file = "logs/commitgate.log"

[commit_message]
max_line_length = 100
scopes = ["core", "cli"]

[pull_request]
target_label_exempt_scopes = ["dev-infra"]
required_statuses = [{ name = "lint" }, { name = "cla/google", type = "status" }]

[pull_request.validation]
assertSignedCla = false

[caretaker]
main_branch = "main"

[caretaker.sync]
synced_file_patterns = ["packages/**"]
separate_file_patterns = ["packages/core/primitives/**"]

[github]
owner = "acme"
name = "widgets"
"""
    )

    config = Config.load(tmp_path)

    assert config.commit_message.max_line_length == 100
    assert config.commit_message.scopes == ["core", "cli"]
    assert config.pull_request.target_label_exempt_scopes == ["dev-infra"]
    assert config.pull_request.required_statuses[1].type == "status"
    assert config.pull_request.validation == {"assertSignedCla": False}
    assert config.caretaker.sync_branch == "g3"
    assert config.caretaker.sync.separate_file_patterns == ["packages/core/primitives/**"]
    assert config.github.owner == "acme"
    assert config.log_file == "logs/commitgate.log"


def test_load_invalid_toml(tmp_path, mock_environment, capsys):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("this is = = not toml")

    config = Config.load(tmp_path)

    assert config == Config()
    assert "Error reading config file" in capsys.readouterr().out


def test_load_unsafe_log_file(tmp_path, mock_environment, capsys):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('log_file = "../../etc/passwd"')

    config = Config.load(tmp_path)

    assert config.log_file is None
    assert "Unsafe log file path" in capsys.readouterr().out


def test_save_and_load(tmp_path, mock_environment):
    config = Config(commit_message=CommitMessageConfig(scopes=["core"]), always_log=True)
    config.save(tmp_path)

    with (tmp_path / DEFAULT_CONFIG_FILENAME).open("rb") as f:
        data = tomli.load(f)
    assert data["commit_message"]["scopes"] == ["core"]
    assert "caretaker" not in data

    loaded = Config.load(tmp_path)
    assert loaded.commit_message.scopes == ["core"]
    assert loaded.commit_message.types["ci"].scope == ScopeRequirement.FORBIDDEN
    assert loaded.always_log


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMMITGATE_LOG_FILE", "env.log")
    monkeypatch.setenv("COMMITGATE_ALWAYS_LOG", "yes")

    config = Config()

    assert config.log_file == "env.log"
    assert config.always_log
    # Explicit values win over the environment
    assert not Config(always_log=False).always_log


def test_require_sections(mock_environment):
    config = Config(commit_message=None)

    with pytest.raises(ConfigValidationError, match="commit_message"):
        config.require_commit_message()
    with pytest.raises(ConfigValidationError, match="caretaker"):
        config.require_caretaker()
    with pytest.raises(ConfigValidationError, match="github"):
        config.require_github()


def test_get_log_file(mock_environment):
    assert Config().get_log_file() is None
    assert Config(log_file="logs/out.log").get_log_file() == Path("logs/out.log")
    assert Config(log_file="/tmp/out.log").get_log_file() is None

    log_file = Config(always_log=True).get_log_file()
    assert log_file.name.startswith("commitgate_log-")
    assert log_file.suffix == ".log"


def test_commit_types_named_from_keys(tmp_path, mock_environment):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        """
[commit_message.types.feat]
scope = "required"

[commit_message.types.chore]
description = "Housekeeping"
scope = "forbidden"
"""
    )

    config = Config.load(tmp_path)

    assert set(config.commit_message.types) == {"feat", "chore"}
    assert config.commit_message.types["feat"].name == "feat"
    assert config.commit_message.types["chore"].name == "chore"
    assert config.commit_message.types["chore"].scope == ScopeRequirement.FORBIDDEN
