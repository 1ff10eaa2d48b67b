"""Tests for commit message file validation."""
from rich.console import Console

from commitgate.commit_message.validate_file import validate_file


def write_message(tmp_path, message):
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text(message, encoding="utf-8")
    return path


def test_valid_file(tmp_path, commit_message_config):
    path = write_message(
        tmp_path,
        "feat(core): add a thing\n\nThis body is long enough to pass.\n# comment line",
    )
    console = Console(record=True, width=200)

    assert validate_file(path, True, commit_message_config, console) == 0
    assert "Valid commit message" in console.export_text()


def test_invalid_file_in_error_mode(tmp_path, commit_message_config):
    path = write_message(tmp_path, "add a thing")
    console = Console(record=True, width=200)

    assert validate_file(path, True, commit_message_config, console) == 1
    output = console.export_text()
    assert "✘ Invalid commit message." in output
    assert "Aborting commit attempt" in output


def test_invalid_file_in_warning_mode(tmp_path, commit_message_config):
    path = write_message(tmp_path, "add a thing")
    console = Console(record=True, width=200)

    assert validate_file(path, False, commit_message_config, console) == 0
    output = console.export_text()
    assert "! Invalid commit message." in output
    assert "amended to follow commit message guidelines" in output
