"""Validation keeping the breaking change label and breaking change notes consistent."""
from typing import List

from ...models import Commit
from ..labels import DETECTED_BREAKING_CHANGE
from .config import PullRequestValidation, ValidationName, create_pull_request_validation


class BreakingChangeInfoValidation(PullRequestValidation):
    def assert_(self, commits: List[Commit], labels: List[str]) -> None:
        has_label = DETECTED_BREAKING_CHANGE.name in labels
        has_commit = any(commit.breaking_changes for commit in commits)

        if not has_label and has_commit:
            raise self._create_error(
                "Pull Request has at least one commit containing a breaking change note, "
                "but does not have a breaking change label. Make sure to apply the "
                f"following label: {DETECTED_BREAKING_CHANGE.name}"
            )
        if has_label and not has_commit:
            raise self._create_error(
                "Pull Request has a breaking change label, but does not contain any commits "
                "with breaking change notes (i.e. commits do not have a "
                "`BREAKING CHANGE: <..>` section)."
            )


breaking_change_info_validation = create_pull_request_validation(
    ValidationName.BREAKING_CHANGE_INFO, False, BreakingChangeInfoValidation
)
