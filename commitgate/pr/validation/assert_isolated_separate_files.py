"""Validation keeping separately synced files and other synced files in separate syncs.

Both tracks are synchronized from the main branch through the sync branch. A
pull request may not touch one track while the other track already has
unsynchronized changes on the main branch.
"""
from typing import Optional

from git import Repo

from ...config import Config
from ...sync import SyncMatcher, retrieve_diff_stats
from ..github import GithubClient, require_github_client
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class IsolatedSeparateFilesValidation(PullRequestValidation):
    async def assert_(
        self, config: Config, number: int, github: Optional[GithubClient], repo: Repo
    ) -> None:
        if config.caretaker is None:
            raise self._create_error("No Caretaker Config was found.")

        sync_config = config.caretaker.sync
        if sync_config is None or not sync_config.separate_file_patterns:
            return

        diff_stats = retrieve_diff_stats(repo, config.caretaker)
        if diff_stats is None:
            return

        files = await require_github_client(github).fetch_pull_request_files(number)
        has_separate_files = SyncMatcher(sync_config).any_separate(files)

        if diff_stats.separate_files > 0 and not has_separate_files:
            raise self._create_error(
                "This PR cannot be merged as separately synced code has already been merged. "
                "Separately synced code and the remaining synced code must be merged and "
                "synced separately. Try again after a sync has finished."
            )
        if diff_stats.files > 0 and diff_stats.separate_files == 0 and has_separate_files:
            raise self._create_error(
                "This PR cannot be merged as synced code has already been merged. "
                "Separately synced code and the remaining synced code must be merged and "
                "synced separately. Try again after a sync has finished."
            )


isolated_separate_files_validation = create_pull_request_validation(
    ValidationName.ISOLATED_SEPARATE_FILES, True, IsolatedSeparateFilesValidation
)
