"""
Full-stack scenarios: HTTP -> service -> repository -> SQLAlchemy -> SQLite.

Only the session dependency is overridden (see `db_app`), so these exercise the real
integrity-error classification on a real unique constraint.
"""

import uuid
from datetime import datetime

import pytest


@pytest.mark.asyncio
class TestPostsEndToEnd:

    async def test_create_conflict_read_update_list(self, async_client):
        """
        Behavior:
                - Create A and B; create A again; read A; rename A to C; list.

        Importance:
                - Covers every status path the posts resource has against a real
                  unique constraint, including that a failed create leaves the
                  store usable for the following requests.
        """
        # Create A and B
        resp_a = await async_client.post("/posts", json={"title": "A", "body": "body of A"})
        resp_b = await async_client.post("/posts", json={"title": "B", "body": "body of B"})

        assert resp_a.status_code == 201
        assert resp_b.status_code == 201
        post_a = resp_a.json()["data"]
        uuid.UUID(post_a["id"])
        datetime.fromisoformat(post_a["created_at"])

        # Duplicate title
        resp_dup = await async_client.post("/posts", json={"title": "A", "body": "again"})

        assert resp_dup.status_code == 409
        assert resp_dup.json()["status_code"] == 409
        assert "A" in resp_dup.json()["data"]["message"]

        # Read
        resp_get = await async_client.get(f"/posts/{post_a['id']}")

        assert resp_get.status_code == 200
        assert resp_get.json()["data"]["title"] == "A"

        # Rename A to C, body untouched
        resp_patch = await async_client.patch(f"/posts/{post_a['id']}", json={"title": "C"})

        assert resp_patch.status_code == 200
        updated = resp_patch.json()["data"]
        assert updated["title"] == "C"
        assert updated["body"] == "body of A"
        assert updated["created_at"] == post_a["created_at"]

        # List: newest first, the failed create left nothing behind
        resp_list = await async_client.get("/posts")

        assert resp_list.status_code == 200
        assert [p["title"] for p in resp_list.json()["data"]] == ["B", "C"]

    async def test_freed_title_can_be_reused(self, async_client):
        first = (await async_client.post("/posts", json={"title": "A", "body": "x"})).json()["data"]
        await async_client.patch(f"/posts/{first['id']}", json={"title": "Z"})

        resp = await async_client.post("/posts", json={"title": "A", "body": "y"})

        assert resp.status_code == 201

    async def test_rename_onto_taken_title_is_409_and_nothing_changes(self, async_client):
        await async_client.post("/posts", json={"title": "A", "body": "x"})
        b = (await async_client.post("/posts", json={"title": "B", "body": "y"})).json()["data"]

        resp = await async_client.patch(f"/posts/{b['id']}", json={"title": "A", "body": "changed"})

        assert resp.status_code == 409
        assert resp.json()["data"]["message"] == "Blog post with title A already exists."
        unchanged = (await async_client.get(f"/posts/{b['id']}")).json()["data"]
        assert unchanged == b

    async def test_not_found_paths(self, async_client):
        missing = uuid.uuid4()

        get_resp = await async_client.get(f"/posts/{missing}")
        patch_resp = await async_client.patch(f"/posts/{missing}", json={"body": "x"})

        assert get_resp.status_code == 404
        assert patch_resp.status_code == 404
        assert patch_resp.json()["data"]["message"] == f"Could not find blog post with id {missing}."

    async def test_request_id_is_echoed(self, async_client):
        resp = await async_client.get("/posts", headers={"X-Request-ID": "e2e-123"})

        assert resp.headers["X-Request-ID"] == "e2e-123"
