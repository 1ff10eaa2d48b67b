"""Validation of every commit message in a range of commits."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from git import Repo
from rich.console import Console

from ..config import CommitMessageConfig
from ..models import Commit, ValidationOptions
from ..observers import ValidationObserver
from .parse import parse_commit_message
from .validator import CommitMessageValidator, print_validation_errors


@dataclass
class RangeValidationResult:
    valid: bool
    errors: List[Tuple[str, List[str]]] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.valid else 1


def get_commits_in_range(repo: Repo, from_ref: str, to_ref: str = "HEAD") -> List[Commit]:
    """Parse the commits in ``from_ref..to_ref``, oldest first."""
    commits = list(repo.iter_commits(f"{from_ref}..{to_ref}"))
    commits.reverse()
    return [parse_commit_message(c.message, sha=c.hexsha) for c in commits]


def build_range_options(commits: Sequence[Commit], index: int) -> ValidationOptions:
    """Options for the commit at ``index`` of an oldest-first commit list.

    A fixup commit may only target a non-fixup commit that appears later in
    the list.
    """
    commit = commits[index]
    headers = None
    if commit.is_fixup:
        headers = [c.header for c in commits[index + 1:] if not c.is_fixup]
    return ValidationOptions(disallow_squash=True, non_fixup_commit_headers=headers)


async def validate_commits(
    commits: Sequence[Commit],
    config: Optional[CommitMessageConfig] = None,
    observers: Optional[List[ValidationObserver]] = None,
) -> RangeValidationResult:
    """Validate an oldest-first list of commits, one at a time."""
    validator = CommitMessageValidator(config)
    result = RangeValidationResult(valid=True)

    for index, commit in enumerate(commits):
        commit_result = validator.validate(commit, build_range_options(commits, index))
        for observer in observers or []:
            await observer.on_commit_validated(commit_result)
        if commit_result.errors:
            result.errors.append((commit.header, commit_result.errors))
        result.valid = result.valid and commit_result.valid

    return result


async def validate_commit_range(
    from_ref: str,
    to_ref: str = "HEAD",
    repo_path: str = ".",
    config: Optional[CommitMessageConfig] = None,
    console: Optional[Console] = None,
    observers: Optional[List[ValidationObserver]] = None,
) -> RangeValidationResult:
    """Validate every commit in ``from_ref..to_ref`` and print a report.

    The returned result's ``exit_code`` is non-zero when any commit is invalid.
    """
    console = console or Console()
    commits = get_commits_in_range(Repo(repo_path), from_ref, to_ref)
    console.print(f"Examining {len(commits)} commit(s) in the provided range: {from_ref}..{to_ref}")

    result = await validate_commits(commits, config, observers)

    if result.valid:
        console.print("[green]✔  All commit messages in range valid.[/green]")
    else:
        console.print("[red]✘  Invalid commit message[/red]")
        for header, errors in result.errors:
            console.print(header, style="bold red", markup=False, highlight=False)
            print_validation_errors(errors, console)

    for observer in observers or []:
        await observer.on_range_validated(result.valid, from_ref, to_ref, len(commits))

    return result
