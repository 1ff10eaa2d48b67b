"""Tests for pull request snapshots and status normalization."""
import json

from commitgate.pr.snapshot import (
    CommitStatus,
    PullRequest,
    PullRequestCommit,
    PullRequestState,
    PullRequestStatus,
    StatusEntry,
    combine_statuses,
    get_statuses_for_pull_request,
    normalize_check_state,
    normalize_status_state,
)


def pull_request_with_status(status):
    return PullRequest(number=1, commits=[PullRequestCommit(message="fix: x", status=status)])


def test_normalize_status_state():
    assert normalize_status_state("SUCCESS") == PullRequestStatus.PASSING
    assert normalize_status_state("EXPECTED") == PullRequestStatus.PASSING
    assert normalize_status_state("PENDING") == PullRequestStatus.PENDING
    assert normalize_status_state("ERROR") == PullRequestStatus.FAILING
    assert normalize_status_state(None) == PullRequestStatus.FAILING


def test_normalize_check_state():
    assert normalize_check_state("SUCCESS", "COMPLETED") == PullRequestStatus.PASSING
    assert normalize_check_state("NEUTRAL", "COMPLETED") == PullRequestStatus.PASSING
    assert normalize_check_state("FAILURE", "COMPLETED") == PullRequestStatus.FAILING
    assert normalize_check_state(None, "IN_PROGRESS") == PullRequestStatus.PENDING
    assert normalize_check_state(None, "QUEUED") == PullRequestStatus.PENDING


def test_combine_statuses():
    assert combine_statuses([]) == PullRequestStatus.PASSING
    assert combine_statuses([PullRequestStatus.PASSING, PullRequestStatus.PENDING]) == PullRequestStatus.PENDING
    assert combine_statuses([PullRequestStatus.PENDING, PullRequestStatus.FAILING]) == PullRequestStatus.FAILING


def test_statuses_without_commits_are_failing():
    result = get_statuses_for_pull_request(PullRequest(number=1))
    assert result.combined_status == PullRequestStatus.FAILING
    assert result.statuses == []

    result = get_statuses_for_pull_request(pull_request_with_status(None))
    assert result.combined_status == PullRequestStatus.FAILING


def test_statuses_use_rollup_state():
    status = CommitStatus(
        state="PENDING",
        entries=[StatusEntry(name="lint", kind="check", outcome="SUCCESS")],
    )
    result = get_statuses_for_pull_request(pull_request_with_status(status))

    assert result.combined_status == PullRequestStatus.PENDING
    assert result.statuses[0].name == "lint"
    assert result.statuses[0].type == "check"
    assert result.statuses[0].status == PullRequestStatus.PASSING


def test_statuses_derived_without_rollup_state():
    status = CommitStatus(entries=[
        StatusEntry(name="lint", kind="check", outcome="SUCCESS"),
        StatusEntry(name="test", kind="check", status="IN_PROGRESS"),
        StatusEntry(name="cla/google", kind="status", outcome="SUCCESS"),
    ])
    result = get_statuses_for_pull_request(pull_request_with_status(status))

    assert result.combined_status == PullRequestStatus.PENDING


def test_statuses_use_most_recent_commit():
    pull_request = PullRequest(number=1, commits=[
        PullRequestCommit(message="fix: a", status=CommitStatus(state="FAILURE")),
        PullRequestCommit(message="fix: b", status=CommitStatus(state="SUCCESS")),
    ])
    assert get_statuses_for_pull_request(pull_request).combined_status == PullRequestStatus.PASSING


def test_load_snapshot(tmp_path):
    path = tmp_path / "pr.json"
    path.write_text(json.dumps({
        "number": 7,
        "state": "MERGED",
        "is_draft": True,
        "labels": ["action: merge"],
        "reviews": [{"author": "someone", "author_association": "MEMBER"}],
        "commits": [{"sha": "abc", "message": "fix(core): x", "status": {"state": "SUCCESS"}}],
    }))

    pull_request = PullRequest.load(path)

    assert pull_request.number == 7
    assert pull_request.state == PullRequestState.MERGED
    assert pull_request.is_draft
    assert pull_request.reviews[0].author_association == "MEMBER"
    assert pull_request.commits[0].status.state == "SUCCESS"
