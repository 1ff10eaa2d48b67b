"""Runs every pull request validation against one pull request snapshot."""
import asyncio
from typing import List, Mapping, Optional

from git import Repo

from ...commit_message.parse import parse_commit_message
from ...config import Config
from ...observers import ValidationObserver
from ..github import GithubClient
from ..snapshot import PullRequest, ReleaseContext
from .assert_allowed_target_label import changes_allow_for_target_label_validation
from .assert_breaking_change_info import breaking_change_info_validation
from .assert_completed_reviews import completed_reviews_validation
from .assert_enforce_tested import enforce_tested_validation
from .assert_enforced_statuses import enforced_statuses_validation
from .assert_isolated_separate_files import isolated_separate_files_validation
from .assert_merge_ready import merge_ready_validation
from .assert_minimum_reviews import minimum_reviews_validation
from .assert_passing_ci import passing_ci_validation
from .assert_pending import pending_state_validation
from .assert_signed_cla import signed_cla_validation
from .failure import PullRequestValidationFailure


async def assert_valid_pull_request(
    pull_request: PullRequest,
    validation_config: Mapping[str, bool],
    config: Config,
    release_context: Optional[ReleaseContext] = None,
    target_label: Optional[str] = None,
    github: Optional[GithubClient] = None,
    repo: Optional[Repo] = None,
    observers: Optional[List[ValidationObserver]] = None,
) -> List[PullRequestValidationFailure]:
    """Run all validations concurrently and collect their failures.

    The target label validation only runs when ``release_context`` is given.
    A validation that raises anything other than a validation failure aborts
    the whole run.

    Returns:
        List[PullRequestValidationFailure]: The failures, empty if the pull request is valid
    """
    labels = list(pull_request.labels)
    commits = [parse_commit_message(c.message, sha=c.sha) for c in pull_request.commits]

    validations = [
        minimum_reviews_validation.run(validation_config, pull_request),
        completed_reviews_validation.run(validation_config, pull_request),
        merge_ready_validation.run(validation_config, pull_request),
        signed_cla_validation.run(validation_config, pull_request),
        pending_state_validation.run(validation_config, pull_request),
        breaking_change_info_validation.run(validation_config, commits, labels),
        passing_ci_validation.run(validation_config, pull_request),
        enforced_statuses_validation.run(validation_config, pull_request, config.pull_request),
        isolated_separate_files_validation.run(
            validation_config, config, pull_request.number, github, repo
        ),
        enforce_tested_validation.run(validation_config, pull_request, github),
    ]
    if release_context is not None:
        validations.append(
            changes_allow_for_target_label_validation.run(
                validation_config,
                commits,
                target_label,
                config.pull_request,
                release_context,
                labels,
            )
        )

    results = await asyncio.gather(*validations)
    failures = [result for result in results if result is not None]

    for observer in observers or []:
        await observer.on_pull_request_validated(pull_request.number, failures)

    return failures
