"""Validation requiring the combined status of the pull request head to pass."""
from ..snapshot import PullRequest, PullRequestStatus, get_statuses_for_pull_request
from .config import PullRequestValidation, ValidationName, create_pull_request_validation

REQUIRED_CHECK_NAME = "lint"


class PassingCiValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        result = get_statuses_for_pull_request(pull_request)
        if not any(s.name == REQUIRED_CHECK_NAME for s in result.statuses):
            raise self._create_error(
                "Pull request is missing expected status checks. "
                "Check the pull request for pending workflows"
            )
        if result.combined_status == PullRequestStatus.PENDING:
            raise self._create_error("Pull request has pending status checks.")
        if result.combined_status == PullRequestStatus.FAILING:
            raise self._create_error("Pull request has failing status checks.")


passing_ci_validation = create_pull_request_validation(
    ValidationName.PASSING_CI, True, PassingCiValidation
)
