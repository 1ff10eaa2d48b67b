"""Validation requiring a TESTED= comment on pull requests that need extra verification."""
from typing import List, Optional

from ..github import GithubClient, require_github_client
from ..labels import REQUIRES_TGP
from ..snapshot import Comment, PullRequest
from .config import PullRequestValidation, ValidationName, create_pull_request_validation

TESTED_COMMENT_MARKER = "TESTED="


async def pull_request_has_valid_tested_comment(
    comments: List[Comment], github: GithubClient
) -> bool:
    for comment in comments:
        if comment.body.startswith(TESTED_COMMENT_MARKER) and await github.is_org_member(
            comment.author
        ):
            return True
    return False


class EnforceTestedValidation(PullRequestValidation):
    async def assert_(self, pull_request: PullRequest, github: Optional[GithubClient]) -> None:
        if REQUIRES_TGP.name not in pull_request.labels:
            return

        github = require_github_client(github)
        comments = await github.fetch_pull_request_comments(pull_request.number)
        if await pull_request_has_valid_tested_comment(comments, github):
            return

        raise self._create_error(
            "Pull Request requires a TGP and does not have one. Either run a TGP or specify "
            'the PR is fully tested by adding a comment with "TESTED=[reason]".'
        )


enforce_tested_validation = create_pull_request_validation(
    ValidationName.ENFORCE_TESTED, True, EnforceTestedValidation
)
