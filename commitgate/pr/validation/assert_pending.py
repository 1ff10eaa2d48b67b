"""Validation rejecting pull requests that are already closed or merged."""
from ..snapshot import PullRequest, PullRequestState
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class PendingStateValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        if pull_request.state == PullRequestState.CLOSED:
            raise self._create_error("Pull request is already closed.")
        if pull_request.state == PullRequestState.MERGED:
            raise self._create_error("Pull request is already merged.")


pending_state_validation = create_pull_request_validation(
    ValidationName.PENDING, False, PendingStateValidation
)
