"""Validation rejecting pull requests with outstanding review requests."""
from ..snapshot import PullRequest
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class CompletedReviewsValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        total_count = pull_request.pending_review_request_count
        if total_count != 0:
            raise self._create_error(
                "Pull request cannot be merged with pending reviews, "
                f"it currently has {total_count} pending review(s)"
            )


completed_reviews_validation = create_pull_request_validation(
    ValidationName.COMPLETED_REVIEWS, False, CompletedReviewsValidation
)
