"""Validation of a commit message file, as written by git for the commit-msg hook."""
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import CommitMessageConfig
from .validator import CommitMessageValidator, print_validation_errors


def validate_file(
    file_path: Path,
    error_mode: bool,
    config: Optional[CommitMessageConfig] = None,
    console: Optional[Console] = None,
) -> int:
    """Validate the commit message stored in ``file_path``.

    Args:
        file_path: Path of the commit message file
        error_mode: Whether an invalid message is a failure rather than a warning
        config: Commit message rules
        console: Optional Rich console for output

    Returns:
        int: The exit code, 1 only for invalid messages in error mode
    """
    console = console or Console()
    message = file_path.read_text(encoding="utf-8")
    result = CommitMessageValidator(config).validate(message)

    if result.valid:
        console.print("[green]✔[/green]  Valid commit message")
        return 0

    style = "red" if error_mode else "yellow"
    console.print(
        "✘ Invalid commit message." if error_mode else "! Invalid commit message.",
        style=style,
    )
    print_validation_errors(result.errors, console, style=style)
    if error_mode:
        console.print("Aborting commit attempt due to invalid commit message.", style=style)
        return 1

    console.print(
        "Before this commit can be merged into the upstream repository, it must be",
        style=style,
    )
    console.print("amended to follow commit message guidelines.", style=style)
    return 0
