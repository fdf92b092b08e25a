"""Tests for GitDataOperations request shapes."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.models.types import CommitAuthor, Reference, TreeEntry


@pytest.fixture
def client():
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.get_raw = AsyncMock()
    return client


def _ref_response(name, sha):
    return {"ref": name, "object": {"sha": sha, "type": "commit"}}


class TestGitDataOperations:
    """Tests for GitDataOperations."""

    @pytest.mark.asyncio
    async def test_get_ref_uses_single_ref_endpoint(self, client):
        client.get.return_value = _ref_response("refs/heads/main", "s0")

        ref = await GitDataOperations(client).get_ref("acme", "widgets", "refs/heads/main")

        client.get.assert_awaited_once_with("repos/acme/widgets/git/ref/heads/main")
        assert ref == Reference(name="refs/heads/main", sha="s0")

    @pytest.mark.asyncio
    async def test_create_ref(self, client):
        client.post.return_value = _ref_response("refs/heads/x", "s0")

        await GitDataOperations(client).create_ref("acme", "widgets", "refs/heads/x", "s0")

        client.post.assert_awaited_once_with(
            "repos/acme/widgets/git/refs", data={"ref": "refs/heads/x", "sha": "s0"}
        )

    @pytest.mark.asyncio
    async def test_update_ref_defaults_to_fast_forward(self, client):
        client.patch.return_value = _ref_response("refs/heads/x", "s1")

        ref = await GitDataOperations(client).update_ref(
            "acme", "widgets", Reference(name="refs/heads/x", sha="s1")
        )

        client.patch.assert_awaited_once_with(
            "repos/acme/widgets/git/refs/heads/x", data={"sha": "s1", "force": False}
        )
        assert ref.sha == "s1"

    @pytest.mark.asyncio
    async def test_create_tree_sends_base_and_entries(self, client):
        client.post.return_value = {"sha": "t1", "tree": []}
        entries = [TreeEntry(path="a.txt", content="A"), TreeEntry(path="b/c.txt", content="C")]

        tree = await GitDataOperations(client).create_tree("acme", "widgets", "t0", entries)

        client.post.assert_awaited_once_with(
            "repos/acme/widgets/git/trees",
            data={
                "base_tree": "t0",
                "tree": [
                    {"path": "a.txt", "mode": "100644", "type": "blob", "content": "A"},
                    {"path": "b/c.txt", "mode": "100644", "type": "blob", "content": "C"},
                ],
            },
        )
        assert tree.sha == "t1"
        assert tree.entries == entries

    @pytest.mark.asyncio
    async def test_get_commit_parses_tree_and_parents(self, client):
        client.get.return_value = {
            "sha": "c1",
            "message": "msg",
            "tree": {"sha": "t1"},
            "parents": [{"sha": "c0"}],
            "author": {"name": "octocat", "email": "o@example.com", "date": "2024-01-01T00:00:00Z"},
        }

        commit = await GitDataOperations(client).get_commit("acme", "widgets", "c1")

        client.get.assert_awaited_once_with("repos/acme/widgets/git/commits/c1")
        assert commit.tree_sha == "t1"
        assert commit.parent_shas == ["c0"]
        assert commit.author.name == "octocat"

    @pytest.mark.asyncio
    async def test_create_commit_payload(self, client):
        client.post.return_value = {"sha": "c2", "message": "m", "tree": {"sha": "t1"}, "parents": [{"sha": "c1"}]}
        author = CommitAuthor(name="octocat", email="test@test.com", date="2024-01-01T00:00:00Z")

        commit = await GitDataOperations(client).create_commit("acme", "widgets", "m", "t1", ["c1"], author)

        client.post.assert_awaited_once_with(
            "repos/acme/widgets/git/commits",
            data={
                "message": "m",
                "tree": "t1",
                "parents": ["c1"],
                "author": {"name": "octocat", "email": "test@test.com", "date": "2024-01-01T00:00:00Z"},
            },
        )
        assert commit.sha == "c2"
        assert commit.author is None

    @pytest.mark.asyncio
    async def test_get_blob_raw(self, client):
        client.get_raw.return_value = b"content"

        data = await GitDataOperations(client).get_blob_raw("acme", "widgets", "b1")

        client.get_raw.assert_awaited_once_with("repos/acme/widgets/git/blobs/b1")
        assert data == b"content"
