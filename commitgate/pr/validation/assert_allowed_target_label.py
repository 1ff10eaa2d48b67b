"""Validation checking the commits of a pull request against its target label."""
from typing import List, Optional

from rich.console import Console

from ...config import PullRequestConfig
from ...models import Commit
from ..labels import (
    MERGE_FIX_COMMIT_MESSAGE,
    TARGET_LTS,
    TARGET_MAJOR,
    TARGET_MINOR,
    TARGET_PATCH,
    TARGET_RC,
)
from ..snapshot import ReleaseContext
from .config import PullRequestValidation, ValidationName, create_pull_request_validation

console = Console(stderr=True)


class ChangesAllowForTargetLabelValidation(PullRequestValidation):
    def assert_(
        self,
        commits: List[Commit],
        target_label: Optional[str],
        config: PullRequestConfig,
        release_context: ReleaseContext,
        labels: List[str],
    ) -> None:
        if MERGE_FIX_COMMIT_MESSAGE.name in labels:
            console.print(
                "[dim]Skipping commit message target label validation because the "
                "commit message fixup label is applied.[/dim]"
            )
            return

        # Commits with an exempt scope have no content requirements for the target label.
        commits = [c for c in commits if c.scope not in config.target_label_exempt_scopes]
        has_breaking_changes = any(c.breaking_changes for c in commits)
        has_deprecations = any(c.deprecations for c in commits)
        has_feature_commits = any(c.type == "feat" for c in commits)

        if target_label == TARGET_MAJOR.name:
            return
        if target_label == TARGET_MINOR.name:
            if has_breaking_changes:
                raise self._breaking_changes_error(target_label)
            return
        if target_label in (TARGET_RC.name, TARGET_LTS.name, TARGET_PATCH.name):
            if has_breaking_changes:
                raise self._breaking_changes_error(target_label)
            if has_feature_commits:
                raise self._create_error(
                    f'Cannot merge into branch for "{target_label}" as the pull request has '
                    'commits with the "feat" type. New features can only be merged with the '
                    '"target: minor" or "target: major" label.'
                )
            # Deprecations belong in minor or major releases.
            if has_deprecations and not release_context.is_feature_freeze:
                raise self._create_error(
                    f'Cannot merge into branch for "{target_label}" as the pull request '
                    'contains deprecations. Deprecations can only be merged with the '
                    '"target: minor" or "target: major" label.'
                )
            return

        console.print("[red]WARNING: Unable to confirm all commits in the pull request are[/red]")
        console.print(
            f"[red]eligible to be merged into the target branches for: {target_label}[/red]"
        )

    def _breaking_changes_error(self, target_label: str):
        return self._create_error(
            f'Cannot merge into branch for "{target_label}" as the pull request has '
            'breaking changes. Breaking changes can only be merged with the "target: major" label.'
        )


changes_allow_for_target_label_validation = create_pull_request_validation(
    ValidationName.CHANGES_ALLOW_FOR_TARGET_LABEL, True, ChangesAllowForTargetLabelValidation
)
