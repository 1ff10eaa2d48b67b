"""Observer pattern for validation events."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from rich.console import Console

from .models import ValidationResult

if TYPE_CHECKING:
    from .pr.validation.failure import PullRequestValidationFailure


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    async def on_commit_validated(self, result: ValidationResult) -> None:
        """Called after a single commit has been validated."""
        pass

    @abstractmethod
    async def on_range_validated(self, valid: bool, from_ref: str, to_ref: str, count: int) -> None:
        """Called when a commit range validation completes."""
        pass

    @abstractmethod
    async def on_pull_request_validated(
        self, number: int, failures: List["PullRequestValidationFailure"]
    ) -> None:
        """Called when all validations of a pull request have settled."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that logs validation events to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    async def on_commit_validated(self, result: ValidationResult) -> None:
        if not result.valid:
            self.console.print(
                f"[yellow]Invalid commit: {result.commit.header}[/yellow]", highlight=False
            )

    async def on_range_validated(self, valid: bool, from_ref: str, to_ref: str, count: int) -> None:
        if valid:
            self.console.print(f"[green]Validated {count} commit(s) in {from_ref}..{to_ref}[/green]")
        else:
            self.console.print(f"[red]Found invalid commits in {from_ref}..{to_ref}[/red]")

    async def on_pull_request_validated(
        self, number: int, failures: List["PullRequestValidationFailure"]
    ) -> None:
        if not failures:
            self.console.print(f"[green]Pull request #{number} passed all validations[/green]")
        else:
            self.console.print(
                f"[red]Pull request #{number} failed {len(failures)} validation(s)[/red]"
            )


class FileLogObserver(ValidationObserver):
    """Observer that logs validation events to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_commit_validated(self, result: ValidationResult) -> None:
        status = "Valid" if result.valid else "Invalid"
        await self._log(f"{status} commit: {result.commit.header}")
        for error in result.errors:
            await self._log(f"  {error}")

    async def on_range_validated(self, valid: bool, from_ref: str, to_ref: str, count: int) -> None:
        status = "Valid" if valid else "Invalid"
        await self._log(f"{status} range {from_ref}..{to_ref} ({count} commits)")

    async def on_pull_request_validated(
        self, number: int, failures: List["PullRequestValidationFailure"]
    ) -> None:
        await self._log(f"Pull request #{number}: {len(failures)} failure(s)")
        for failure in failures:
            await self._log(f"  [{failure.validation_name}] {failure.message}")
