"""Commit message validation."""
from typing import Optional, Union

from rich.console import Console

from ..config import CommitMessageConfig
from ..models import Commit, ValidationOptions, ValidationResult
from .parse import parse_commit_message
from .validation import create_validation_chain


class CommitMessageValidator:
    """Validates commit messages against the configured commit message rules."""

    def __init__(self, config: Optional[CommitMessageConfig] = None):
        self.config = config or CommitMessageConfig()

    def validate(
        self,
        commit: Union[str, Commit],
        options: Optional[ValidationOptions] = None,
    ) -> ValidationResult:
        """Validate a commit, or a raw commit message, stopping at the first failing rule."""
        if isinstance(commit, str):
            commit = parse_commit_message(commit)
        chain = create_validation_chain(self.config, options or ValidationOptions())
        valid, error = chain.handle(commit)
        return ValidationResult(valid=valid, errors=[] if valid else [error], commit=commit)


def print_validation_errors(errors, console: Optional[Console] = None, style: str = "red") -> None:
    """Print the errors of a commit validation followed by the expected format."""
    console = console or Console()
    console.print(f"[{style}]Error{'' if len(errors) == 1 else 's'}:[/{style}]")
    for error in errors:
        console.print(f"  {error}", style=style, markup=False, highlight=False)
    console.print()
    console.print("The expected format for a commit is: ")
    console.print("<type>(<scope>): <summary>", markup=False)
    console.print()
    console.print("<body>", markup=False)
    console.print()
    console.print("BREAKING CHANGE: <breaking change summary>", markup=False)
    console.print()
    console.print("<breaking change description>", markup=False)
    console.print()
