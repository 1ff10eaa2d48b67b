"""Validation requiring an approving review from an organization member."""
from ..snapshot import PullRequest
from .config import PullRequestValidation, ValidationName, create_pull_request_validation

MEMBER_ASSOCIATION = "MEMBER"


class MinimumReviewsValidation(PullRequestValidation):
    def assert_(self, pull_request: PullRequest) -> None:
        member_reviews = [
            review for review in pull_request.reviews
            if review.author_association == MEMBER_ASSOCIATION
        ]
        if not member_reviews:
            raise self._create_error(
                "Pull request cannot be merged without at least one review from a team member"
            )


minimum_reviews_validation = create_pull_request_validation(
    ValidationName.MINIMUM_REVIEWS, False, MinimumReviewsValidation
)
