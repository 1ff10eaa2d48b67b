import pytest
import tempfile
from pathlib import Path
from git import Repo

from commitgate.config import CommitMessageConfig
from commitgate.pr.snapshot import CommitStatus, PullRequest, PullRequestCommit, Review, StatusEntry

pytest_plugins = ('pytest_asyncio',)


def commit_file(repo: Repo, file_name: str, content: str, message: str) -> str:
    """Write a file, commit it and return the commit sha."""
    path = Path(repo.working_tree_dir) / file_name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([file_name])
    return repo.index.commit(message).hexsha


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        # Initialize git repo
        repo = Repo.init(tmp_dir)
        with repo.config_writer() as writer:
            writer.set_value("user", "name", "Test User")
            writer.set_value("user", "email", "test@example.com")

        # Initial commit
        commit_file(repo, "test.txt", "Initial content", "build: initial commit\n\nSet up the repository layout.")

        yield tmp_dir


@pytest.fixture
def make_commit():
    return commit_file


@pytest.fixture
def commit_message_config():
    """Commit message rules with a small set of scopes."""
    return CommitMessageConfig(scopes=["core", "cli", "docs-infra"])


@pytest.fixture
def green_status():
    return CommitStatus(
        state="SUCCESS",
        entries=[
            StatusEntry(name="lint", kind="check", outcome="SUCCESS"),
            StatusEntry(name="cla/google", kind="status", outcome="SUCCESS"),
        ],
    )


@pytest.fixture
def mergeable_pull_request(green_status):
    """A pull request that passes every default validation."""
    return PullRequest(
        number=42,
        labels=["action: merge"],
        reviews=[Review(author="reviewer", author_association="MEMBER")],
        commits=[
            PullRequestCommit(
                sha="abc123",
                message="feat(core): add a thing\n\nAdds a thing that does stuff to the core.",
                status=green_status,
            )
        ],
    )


@pytest.fixture
def mock_environment(monkeypatch):
    """Clear environment variables that change commitgate behavior."""
    for name in ("CI", "CI_PULL_REQUEST", "COMMITGATE_LOG_FILE", "COMMITGATE_ALWAYS_LOG", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    yield
