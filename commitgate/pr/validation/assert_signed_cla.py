"""Validation requiring a passing contributor license agreement status."""
from ..snapshot import PullRequest, PullRequestStatus, get_statuses_for_pull_request
from .config import PullRequestValidation, ValidationName, create_pull_request_validation

CLA_STATUS_NAME = "cla/google"


class SignedClaValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        statuses = get_statuses_for_pull_request(pull_request).statuses
        passing = any(
            s.name == CLA_STATUS_NAME and s.status == PullRequestStatus.PASSING
            for s in statuses
        )
        if not passing:
            raise self._create_error("CLA is not signed by the contributor.")


signed_cla_validation = create_pull_request_validation(
    ValidationName.SIGNED_CLA, True, SignedClaValidation
)
