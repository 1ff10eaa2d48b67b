"""Tests for the GitHub client."""
import httpx
import pytest

from commitgate.config import GithubConfig
from commitgate.pr.github import GithubClient


def make_client(handler, **config):
    github_config = GithubConfig(owner="acme", name="widgets", **config)
    transport = httpx.MockTransport(handler)
    return GithubClient(
        github_config,
        client=httpx.AsyncClient(base_url=github_config.api_url, transport=transport),
    )


@pytest.mark.asyncio
async def test_fetch_pull_request_comments():
    def handler(request):
        assert request.url.path == "/repos/acme/widgets/issues/5/comments"
        return httpx.Response(200, json=[
            {"user": {"login": "alice"}, "author_association": "MEMBER", "body": "TESTED=yes"},
            {"user": None, "body": None},
        ])

    async with make_client(handler) as github:
        comments = await github.fetch_pull_request_comments(5)

    assert comments[0].author == "alice"
    assert comments[0].author_association == "MEMBER"
    assert comments[0].body == "TESTED=yes"
    assert comments[1].author == ""
    assert comments[1].body == ""


@pytest.mark.asyncio
async def test_fetch_pull_request_comments_follows_next_page():
    next_url = "https://api.github.com/repos/acme/widgets/issues/5/comments?per_page=100&page=2"

    def handler(request):
        if request.url.params.get("page") == "2":
            return httpx.Response(200, json=[{"user": {"login": "alice"}, "body": "TESTED=yes"}])
        comments = [{"user": {"login": "bob"}, "body": f"comment {i}"} for i in range(100)]
        return httpx.Response(200, json=comments, headers={"Link": f'<{next_url}>; rel="next"'})

    async with make_client(handler) as github:
        comments = await github.fetch_pull_request_comments(5)

    assert len(comments) == 101
    assert comments[-1].body == "TESTED=yes"


@pytest.mark.asyncio
async def test_fetch_pull_request_files_follows_next_page():
    next_url = "https://api.github.com/repos/acme/widgets/pulls/5/files?per_page=100&page=2"

    def handler(request):
        if request.url.params.get("page") == "2":
            return httpx.Response(200, json=[{"filename": "packages/core/primitives/a.ts"}])
        files = [{"filename": f"src/file{i}.ts"} for i in range(100)]
        return httpx.Response(200, json=files, headers={"Link": f'<{next_url}>; rel="next"'})

    async with make_client(handler) as github:
        files = await github.fetch_pull_request_files(5)

    assert len(files) == 101
    assert files[-1] == "packages/core/primitives/a.ts"


@pytest.mark.asyncio
async def test_fetch_pull_request_files():
    def handler(request):
        assert request.url.path == "/repos/acme/widgets/pulls/5/files"
        return httpx.Response(200, json=[{"filename": "a.ts"}, {"filename": "b/c.ts"}])

    async with make_client(handler) as github:
        assert await github.fetch_pull_request_files(5) == ["a.ts", "b/c.ts"]


@pytest.mark.asyncio
async def test_is_org_member():
    def handler(request):
        if request.url.path == "/orgs/acme-org/members/alice":
            return httpx.Response(204)
        return httpx.Response(404)

    async with make_client(handler, org="acme-org") as github:
        assert await github.is_org_member("alice")
        assert not await github.is_org_member("mallory")


@pytest.mark.asyncio
async def test_is_org_member_defaults_to_owner():
    def handler(request):
        assert request.url.path == "/orgs/acme/members/alice"
        return httpx.Response(204)

    async with make_client(handler) as github:
        assert await github.is_org_member("alice")


@pytest.mark.asyncio
async def test_errors_are_raised():
    def handler(request):
        return httpx.Response(500)

    async with make_client(handler) as github:
        with pytest.raises(httpx.HTTPStatusError):
            await github.fetch_pull_request_files(5)
        with pytest.raises(httpx.HTTPStatusError):
            await github.is_org_member("alice")


def test_token_sets_authorization_header():
    github = GithubClient(GithubConfig(owner="acme", name="widgets"), token="secret")
    assert github.client.headers["Authorization"] == "Bearer secret"
