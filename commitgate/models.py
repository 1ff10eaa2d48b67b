"""Shared models for commitgate."""
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScopeRequirement(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    FORBIDDEN = "forbidden"


class CommitTypeInfo(BaseModel):
    name: str
    description: str = ""
    scope: ScopeRequirement = ScopeRequirement.OPTIONAL


DEFAULT_COMMIT_TYPES: Dict[str, CommitTypeInfo] = {
    info.name: info
    for info in [
        CommitTypeInfo(
            name="build",
            description="Changes to local repository build system and tooling",
            scope=ScopeRequirement.OPTIONAL,
        ),
        CommitTypeInfo(
            name="ci",
            description="Changes to CI configuration and CI specific tooling",
            scope=ScopeRequirement.FORBIDDEN,
        ),
        CommitTypeInfo(
            name="docs",
            description="Changes which exclusively affects documentation.",
            scope=ScopeRequirement.OPTIONAL,
        ),
        CommitTypeInfo(
            name="feat",
            description="Creates a new feature",
            scope=ScopeRequirement.REQUIRED,
        ),
        CommitTypeInfo(
            name="fix",
            description="Fixes a previously discovered failure/bug",
            scope=ScopeRequirement.REQUIRED,
        ),
        CommitTypeInfo(
            name="perf",
            description="Improves performance without any change in functionality or API",
            scope=ScopeRequirement.REQUIRED,
        ),
        CommitTypeInfo(
            name="refactor",
            description="Refactor without any change in functionality or API (includes style changes)",
            scope=ScopeRequirement.OPTIONAL,
        ),
        CommitTypeInfo(
            name="release",
            description="A release point in the repository",
            scope=ScopeRequirement.FORBIDDEN,
        ),
        CommitTypeInfo(
            name="test",
            description="Improvements or corrections made to the project's test suite",
            scope=ScopeRequirement.OPTIONAL,
        ),
    ]
}


class Commit(BaseModel):
    """A parsed commit message.

    ``header`` is the first line of the message with any ``fixup!``,
    ``squash!`` or ``revert`` marker removed, so a fixup commit carries the
    same header as the commit it amends.
    """

    model_config = ConfigDict(frozen=True)

    header: str = ""
    body: str = ""
    footer: str = ""
    full_text: str = ""
    type: str = ""
    scope: str = ""
    subject: str = ""
    breaking_changes: List[str] = Field(default_factory=list)
    deprecations: List[str] = Field(default_factory=list)
    is_revert: bool = False
    is_squash: bool = False
    is_fixup: bool = False
    sha: Optional[str] = None


class ValidationOptions(BaseModel):
    disallow_squash: bool = False
    disallow_fixup: bool = False
    non_fixup_commit_headers: Optional[List[str]] = Field(
        default=None,
        description="Headers a fixup commit may target; None skips the match check",
    )


class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)
    commit: Commit
