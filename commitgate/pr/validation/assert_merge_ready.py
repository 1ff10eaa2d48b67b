"""Validation requiring the pull request to be out of draft and labeled for merge."""
from ..labels import ACTION_MERGE
from ..snapshot import PullRequest
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class MergeReadyValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        if pull_request.is_draft:
            raise self._create_error("Pull request is still a draft.")
        if ACTION_MERGE.name not in pull_request.labels:
            raise self._create_error("Pull request is not marked as merge ready.")


merge_ready_validation = create_pull_request_validation(
    ValidationName.MERGE_READY, False, MergeReadyValidation
)
