"""Validation requiring every configured status to be reported."""
from ...config import PullRequestConfig
from ..snapshot import PullRequest, get_statuses_for_pull_request
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class EnforcedStatusesValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest, config: PullRequestConfig) -> None:
        if config.required_statuses is None:
            return

        statuses = get_statuses_for_pull_request(pull_request).statuses
        missing = [
            enforced.name
            for enforced in config.required_statuses
            if not any(s.name == enforced.name and s.type == enforced.type for s in statuses)
        ]
        if missing:
            raise self._create_error(
                f"Required statuses are missing on the pull request ({', '.join(missing)})."
            )


enforced_statuses_validation = create_pull_request_validation(
    ValidationName.ENFORCED_STATUSES, True, EnforcedStatusesValidation
)
