"""End-to-end tests for comment moderation and media uploads."""

import asyncio
from io import BytesIO
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from estate.domain.repository import CommentRepository, PostRepository
from estate.domain.service import FileStorage
from estate.domain.value import CommentStatus
from estate.interface.api.app import create_app
from tests.conftest import make_comment, make_post
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container, auth_cookies):
    """Test client signed in as an admin."""
    return TestClient(create_app(container), cookies=auth_cookies)


def seed_thread(container):
    """A post with a pending comment and a pending reply to it."""

    async def seed():
        posts = await container.get(PostRepository)
        comments = await container.get(CommentRepository)
        post = await posts.save(make_post("Sea View"))
        parent = await comments.save(make_comment(post.id))
        reply = await comments.save(make_comment(post.id, parent_id=parent.id))
        return post, parent, reply

    return asyncio.run(seed())


class TestCommentModeration:
    """Approve, reject, bulk and delete flows over HTTP."""

    def test_approve_moves_post_counter(self, client, container):
        # Arrange
        post, parent, _ = seed_thread(container)

        # Act
        approved = client.post(f"/comments/{parent.id}/approve")
        post_after = client.get(f"/posts/{post.id}")
        rejected = client.post(f"/comments/{parent.id}/reject")
        post_final = client.get(f"/posts/{post.id}")

        # Assert
        assert approved.json()["message"] == "Comment approved successfully."
        assert post_after.json()["comments_count"] == 1
        assert rejected.json()["message"] == "Comment rejected successfully."
        assert post_final.json()["comments_count"] == 0

    def test_show_comment_with_replies(self, client, container):
        # Arrange
        _, parent, reply = seed_thread(container)

        # Act
        response = client.get(f"/comments/{reply.id}")
        parent_view = client.get(f"/comments/{parent.id}")

        # Assert
        assert response.json()["depth"] == 1
        assert response.json()["comment"]["author_display_name"] == "Guest"
        assert [r["comment"]["id"] for r in parent_view.json()["replies"]] == [
            str(reply.id)
        ]

    def test_bulk_approve_and_queue(self, client, container):
        # Arrange
        post, parent, reply = seed_thread(container)

        # Act
        bulk = client.post(
            "/comments/bulk",
            json={"comment_ids": [str(parent.id), str(reply.id)], "action": "approve"},
        )
        queue = client.get("/comments/moderate")
        post_after = client.get(f"/posts/{post.id}")

        # Assert
        assert bulk.status_code == 200
        assert bulk.json() == {
            "count": 2,
            "message": "2 comments approved successfully.",
        }
        assert queue.json()["pending"]["total"] == 0
        assert len(queue.json()["recently_moderated"]) == 2
        assert post_after.json()["comments_count"] == 2

    def test_bulk_with_unknown_id_is_not_found(self, client, container):
        # Arrange
        _, parent, _ = seed_thread(container)

        # Act
        response = client.post(
            "/comments/bulk",
            json={"comment_ids": [str(parent.id), str(uuid4())], "action": "spam"},
        )
        unchanged = client.get(f"/comments/{parent.id}")

        # Assert
        assert response.status_code == 404
        assert unchanged.json()["comment"]["comment"]["status"] == "pending"

    def test_bulk_rejects_unknown_action(self, client, container):
        # Arrange
        _, parent, _ = seed_thread(container)

        # Act
        response = client.post(
            "/comments/bulk",
            json={"comment_ids": [str(parent.id)], "action": "archive"},
        )

        # Assert
        assert response.status_code == 422

    def test_delete_removes_replies(self, client, container):
        # Arrange
        _, parent, reply = seed_thread(container)

        # Act
        deleted = client.delete(f"/comments/{parent.id}")
        reply_after = client.get(f"/comments/{reply.id}")

        # Assert
        assert deleted.status_code == 204
        assert reply_after.status_code == 404

    def test_list_filters_and_analytics(self, client, container):
        # Arrange
        seed_thread(container)

        # Act
        listing = client.get("/comments", params={"status": "pending"})
        spam = client.get("/comments", params={"status": CommentStatus.SPAM.value})
        analytics = client.get("/comments/analytics")

        # Assert
        assert listing.json()["comments"]["total"] == 2
        assert listing.json()["stats"]["pending"] == 2
        assert spam.json()["comments"]["total"] == 0
        assert analytics.json()["guests"] == 2
        assert analytics.json()["top_posts"][0]["title"] == "Sea View"

    def test_like_and_unlike(self, client, container):
        # Arrange
        _, parent, _ = seed_thread(container)
        client.post(f"/comments/{parent.id}/approve")

        # Act
        liked = client.post(f"/comments/{parent.id}/like")
        unliked = client.post(f"/comments/{parent.id}/unlike")

        # Assert
        assert liked.json()["message"] == "Comment has 1 likes."
        assert unliked.json()["message"] == "Comment has 0 likes."

    def test_pending_comment_cannot_be_liked(self, client, container):
        # Arrange
        _, parent, _ = seed_thread(container)

        # Act
        response = client.post(f"/comments/{parent.id}/like")
        unchanged = client.get(f"/comments/{parent.id}")

        # Assert
        assert response.status_code == 404
        assert unchanged.json()["comment"]["comment"]["likes_count"] == 0


class TestCommentSubmission:
    """Guests and signed-in users posting comments."""

    def test_guest_submission_is_pending(self, client, container):
        # Arrange
        anonymous = TestClient(client.app)
        post_id = client.post(
            "/posts", json={"title": "Sea View", "status": "published"}
        ).json()["id"]

        # Act
        response = anonymous.post(
            "/comments",
            json={
                "post_id": post_id,
                "content": "Is parking included?",
                "author_name": "Guest",
                "author_email": "guest@example.com",
            },
        )
        queue = client.get("/comments/moderate")
        post_after = client.get(f"/posts/{post_id}")

        # Assert
        assert response.status_code == 201
        assert response.json()["message"] == (
            "Comment submitted successfully and is pending approval."
        )
        assert response.json()["comment"]["status"] == "pending"
        assert response.json()["comment"]["user_id"] is None
        assert queue.json()["pending"]["total"] == 1
        assert post_after.json()["comments_count"] == 0

    def test_signed_in_submission_uses_account(self, client, admin_id):
        # Arrange
        post_id = client.post(
            "/posts", json={"title": "Sea View", "status": "published"}
        ).json()["id"]

        # Act
        response = client.post(
            "/comments",
            json={
                "post_id": post_id,
                "content": "Updated the floor plan.",
                "author_name": "Ignored",
            },
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["comment"]["user_id"] == str(admin_id)
        assert response.json()["comment"]["author_name"] is None

    def test_draft_post_is_not_found(self, client):
        # Arrange
        post_id = client.post("/posts", json={"title": "Draft"}).json()["id"]

        # Act
        response = client.post(
            "/comments", json={"post_id": post_id, "content": "Too early"}
        )

        # Assert
        assert response.status_code == 404

    def test_guest_needs_name_and_email(self, client):
        # Arrange
        anonymous = TestClient(client.app)
        post_id = client.post(
            "/posts", json={"title": "Sea View", "status": "published"}
        ).json()["id"]

        # Act
        response = anonymous.post(
            "/comments",
            json={"post_id": post_id, "content": "Hi there", "author_name": "G"},
        )

        # Assert
        assert response.status_code == 422
        assert response.json()["detail"] == "Your name and email are required."


class TestMediaUpload:
    """Multipart uploads into the media library."""

    def test_upload_image_and_delete(self, client, container):
        # Arrange
        buffer = BytesIO()
        Image.new("RGB", (8, 5), "blue").save(buffer, format="PNG")

        # Act
        uploaded = client.post(
            "/media",
            files={"file": ("Front Door.png", buffer.getvalue(), "image/png")},
            data={"alt_text": "Front door"},
        )
        media = uploaded.json()
        listing = client.get("/media", params={"type": "image"})
        deleted = client.delete(f"/media/{media['id']}")

        # Assert
        assert uploaded.status_code == 201
        assert media["width"] == 8
        assert media["height"] == 5
        assert media["is_image"] is True
        assert media["alt_text"] == "Front door"
        assert listing.json()["stats"]["images"] == 1
        assert deleted.status_code == 204
        storage = asyncio.run(container.get(FileStorage))
        assert media["path"] not in storage.files

    def test_empty_upload_rejected(self, client):
        # Act
        response = client.post(
            "/media", files={"file": ("empty.txt", b"", "text/plain")}
        )

        # Assert
        assert response.status_code == 422
        assert response.json()["detail"] == "No file was uploaded."

    def test_featured_image_and_seo(self, client):
        # Arrange
        post_id = client.post("/posts", json={"title": "Sea View"}).json()["id"]

        # Act
        uploaded = client.post(
            f"/posts/{post_id}/featured-image",
            files={"image": ("cover.jpg", b"jpeg bytes", "image/jpeg")},
        )
        meta = client.get(f"/posts/{post_id}/seo")

        # Assert
        assert uploaded.status_code == 200
        assert uploaded.json()["post"]["featured_image_id"] == (
            uploaded.json()["media"]["id"]
        )
        assert meta.json()["og_image"] == "/storage/" + uploaded.json()["media"]["path"]
        assert meta.json()["title"] == "Sea View | Estate"
