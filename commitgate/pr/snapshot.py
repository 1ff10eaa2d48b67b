"""Read-only snapshot of a pull request as retrieved from the hosting service."""
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PullRequestStatus(str, Enum):
    PASSING = "passing"
    FAILING = "failing"
    PENDING = "pending"


class PullRequestState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"


class StatusEntry(BaseModel):
    """A single check run or legacy commit status.

    For check runs ``outcome`` holds the conclusion and ``status`` the run
    state; for legacy statuses ``outcome`` holds the state.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: str = Field(description="Either 'check' or 'status'")
    outcome: Optional[str] = None
    status: str = "COMPLETED"

    @property
    def normalized(self) -> PullRequestStatus:
        if self.kind == "check":
            return normalize_check_state(self.outcome, self.status)
        return normalize_status_state(self.outcome)


class CommitStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: Optional[str] = Field(
        default=None,
        description="Rollup state reported by the hosting service, if any",
    )
    entries: List[StatusEntry] = Field(default_factory=list)


class PullRequestCommit(BaseModel):
    model_config = ConfigDict(frozen=True)

    sha: str = ""
    message: str
    status: Optional[CommitStatus] = None


class Review(BaseModel):
    model_config = ConfigDict(frozen=True)

    author: str = ""
    author_association: str
    commit_sha: str = ""


class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    author: str
    author_association: str = "NONE"
    body: str


class BranchRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    repository: str = ""


class PullRequest(BaseModel):
    """Snapshot of a pull request, treated as read-only for a validation run."""

    model_config = ConfigDict(frozen=True)

    number: int
    state: PullRequestState = PullRequestState.OPEN
    is_draft: bool = False
    labels: List[str] = Field(default_factory=list)
    reviews: List[Review] = Field(
        default_factory=list,
        description="Approving reviews",
    )
    pending_review_request_count: int = 0
    commits: List[PullRequestCommit] = Field(
        default_factory=list,
        description="Commits of the pull request, oldest first",
    )
    maintainer_can_modify: bool = False
    viewer_did_author: bool = False
    head_ref: Optional[BranchRef] = None
    base_ref: Optional[BranchRef] = None

    @classmethod
    def load(cls, path: Path) -> 'PullRequest':
        """Load a snapshot from a JSON file."""
        return cls.model_validate_json(path.read_text(encoding="utf-8"))


class NormalizedStatus(BaseModel):
    type: str
    name: str
    status: PullRequestStatus


class PullRequestStatuses(BaseModel):
    combined_status: PullRequestStatus
    statuses: List[NormalizedStatus] = Field(default_factory=list)


def normalize_status_state(state: Optional[str]) -> PullRequestStatus:
    """Retrieve the normalized status for a legacy commit status state."""
    if state in ("SUCCESS", "EXPECTED"):
        return PullRequestStatus.PASSING
    if state == "PENDING":
        return PullRequestStatus.PENDING
    return PullRequestStatus.FAILING


def normalize_check_state(conclusion: Optional[str], status: str) -> PullRequestStatus:
    """Retrieve the normalized status for a check run."""
    if status != "COMPLETED":
        return PullRequestStatus.PENDING
    if conclusion in ("SUCCESS", "NEUTRAL"):
        return PullRequestStatus.PASSING
    return PullRequestStatus.FAILING


def combine_statuses(statuses: List[PullRequestStatus]) -> PullRequestStatus:
    if PullRequestStatus.FAILING in statuses:
        return PullRequestStatus.FAILING
    if PullRequestStatus.PENDING in statuses:
        return PullRequestStatus.PENDING
    return PullRequestStatus.PASSING


def get_statuses_for_pull_request(pull_request: PullRequest) -> PullRequestStatuses:
    """Gets the statuses of the most recent commit of a pull request.

    Check runs and legacy statuses share one normalized shape. A commit
    without any status information counts as failing.
    """
    if not pull_request.commits or pull_request.commits[-1].status is None:
        return PullRequestStatuses(combined_status=PullRequestStatus.FAILING)

    commit_status = pull_request.commits[-1].status
    statuses = [
        NormalizedStatus(type=entry.kind, name=entry.name, status=entry.normalized)
        for entry in commit_status.entries
    ]
    if commit_status.state is not None:
        combined = normalize_status_state(commit_status.state)
    else:
        combined = combine_statuses([s.status for s in statuses])
    return PullRequestStatuses(combined_status=combined, statuses=statuses)


class ReleaseContext(BaseModel):
    """State of the active release trains, when known."""

    is_feature_freeze: bool = Field(
        default=False,
        description="Whether the next release train is in feature freeze",
    )
