"""Diff statistics between the main branch and its synchronization branch."""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from git import GitCommandError, Repo
from wcmatch import glob

from .config import CaretakerConfig, SyncConfig


# `*` stops at `/`, `**` spans zero or more directories, dotfiles need an explicit dot.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB


def _matches_any(path: str, patterns: Iterable[str]) -> bool:
    return any(glob.globmatch(path, pattern, flags=GLOB_FLAGS) for pattern in patterns)


class SyncMatcher:
    """Classifies repository paths into the synced and the separately synced track."""

    def __init__(self, config: SyncConfig):
        self.config = config

    def is_synced(self, path: str) -> bool:
        return (
            _matches_any(path, self.config.synced_file_patterns)
            and not _matches_any(path, self.config.always_external_file_patterns)
            and not _matches_any(path, self.config.separate_file_patterns)
        )

    def is_separate(self, path: str) -> bool:
        return (
            _matches_any(path, self.config.separate_file_patterns)
            and not _matches_any(path, self.config.always_external_file_patterns)
        )

    def any_separate(self, paths: List[str]) -> bool:
        return any(_matches_any(path, self.config.separate_file_patterns) for path in paths)


@dataclass
class DiffStats:
    insertions: int = 0
    deletions: int = 0
    files: int = 0
    separate_files: int = 0
    commits: int = 0


def _resolve_ref(repo: Repo, branch: str) -> Optional[str]:
    for candidate in (f"origin/{branch}", branch):
        try:
            return repo.git.rev_parse("--verify", "--quiet", candidate).strip()
        except GitCommandError:
            continue
    return None


def _to_int(value: str) -> int:
    # Binary files report "-" for both counts.
    return int(value) if value.isdigit() else 0


def get_diff_stats(repo: Repo, sync_ref: str, main_ref: str, matcher: SyncMatcher) -> DiffStats:
    """Count the changes on ``main_ref`` that have not reached ``sync_ref`` yet."""
    stats = DiffStats()
    stats.commits = int(repo.git.rev_list("--count", f"{sync_ref}..{main_ref}"))

    numstat = repo.git.diff(f"{sync_ref}...{main_ref}", "--numstat").strip()
    if not numstat:
        return stats

    for line in numstat.split("\n"):
        insertions, deletions, file_name = line.strip().split("\t", 2)
        if matcher.is_synced(file_name):
            stats.files += 1
        elif matcher.is_separate(file_name):
            stats.separate_files += 1
        else:
            continue
        stats.insertions += _to_int(insertions)
        stats.deletions += _to_int(deletions)

    return stats


def retrieve_diff_stats(repo: Repo, caretaker: CaretakerConfig) -> Optional[DiffStats]:
    """Diff stats between the sync branch and the main branch, None if either is missing."""
    if caretaker.sync is None:
        return None
    sync_ref = _resolve_ref(repo, caretaker.sync_branch)
    main_ref = _resolve_ref(repo, caretaker.main_branch)
    if sync_ref is None or main_ref is None:
        return None
    return get_diff_stats(repo, sync_ref, main_ref, SyncMatcher(caretaker.sync))
