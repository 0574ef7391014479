from botocore.exceptions import ClientError

from conftest import PNG_BYTES, UnreachableSession, auth_headers
from inkpost.api.dependencies.services import get_author_service
from inkpost.api.main import author_app
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.services import AuthorService


BLOG_FORM = {
    "title": "Caching without tears",
    "description": "Read-through caches in practice",
    "blogcontent": "<p>Keys, TTLs and invalidation.</p>",
    "category": "Technology",
}


def cover():
    return {"file": ("cover.png", PNG_BYTES, "image/png")}


def test_create_blog(author_client, harness):
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/new",
        data=BLOG_FORM,
        files=cover(),
        headers=auth_headers(author),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Blog Created"
    assert body["blog"]["author"] == str(author.id)
    assert body["blog"]["category"] == "Technology"
    assert body["blog"]["image"].startswith("https://cdn.inkpost.io/blogs/")

    stored = harness.store.blogs[body["blog"]["id"]]
    assert stored.title == "Caching without tears"
    assert harness.session.commits == 1
    assert harness.publisher.events == [["blogs:*"]]


def test_create_blog_requires_auth(author_client, harness):
    response = author_client.post("/api/v1/blog/new", data=BLOG_FORM, files=cover())

    assert response.status_code == 401
    assert harness.store.blogs == {}


def test_create_blog_without_file(author_client, harness):
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/new",
        data=BLOG_FORM,
        headers=auth_headers(author),
    )

    assert response.status_code == 400
    assert harness.store.blogs == {}
    assert harness.publisher.events == []


def test_create_blog_unknown_category(author_client, harness):
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/new",
        data={**BLOG_FORM, "category": "Techonlogy"},
        files=cover(),
        headers=auth_headers(author),
    )

    assert response.status_code == 422


def test_create_blog_title_too_long(author_client, harness):
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/new",
        data={**BLOG_FORM, "title": "x" * 256},
        files=cover(),
        headers=auth_headers(author),
    )

    assert response.status_code == 422


def test_create_blog_succeeds_when_publishing_fails(author_client, harness):
    harness.publisher.error = ClientError(
        {"Error": {"Code": "AWS.SimpleQueueService.NonExistentQueue", "Message": "gone"}},
        "SendMessage",
    )
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/new",
        data=BLOG_FORM,
        files=cover(),
        headers=auth_headers(author),
    )

    assert response.status_code == 201
    assert len(harness.store.blogs) == 1


def test_update_blog_changes_supplied_fields(author_client, harness):
    author = harness.store.add_user()
    blog = harness.store.add_blog(author.id)
    original_image = blog.image

    response = author_client.post(
        f"/api/v1/blog/{blog.id}",
        data={"title": "Caching with some tears", "category": "Study"},
        headers=auth_headers(author),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Blog Updated"
    assert body["blog"]["title"] == "Caching with some tears"
    assert body["blog"]["category"] == "Study"
    assert body["blog"]["description"] == "Read-through caches in practice"
    assert body["blog"]["image"] == original_image
    assert harness.store.blogs[blog.id].category == BlogCategory.STUDY
    assert harness.publisher.events == [["blogs:*", f"blog:{blog.id}"]]


def test_update_blog_replaces_image_when_file_given(author_client, harness):
    author = harness.store.add_user()
    blog = harness.store.add_blog(author.id)

    response = author_client.post(
        f"/api/v1/blog/{blog.id}",
        files=cover(),
        headers=auth_headers(author),
    )

    assert response.status_code == 200
    assert response.json()["blog"]["image"] != "https://cdn.inkpost.io/blogs/cover.png"
    assert len(harness.s3.objects) == 1


def test_update_blog_by_other_user_is_forbidden(author_client, harness):
    author = harness.store.add_user()
    intruder = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    blog = harness.store.add_blog(author.id)

    response = author_client.post(
        f"/api/v1/blog/{blog.id}",
        data={"title": "Mine now"},
        headers=auth_headers(intruder),
    )

    assert response.status_code == 403
    assert harness.store.blogs[blog.id].title == "Caching without tears"
    assert harness.publisher.events == []


def test_update_missing_blog(author_client, harness):
    author = harness.store.add_user()

    response = author_client.post(
        "/api/v1/blog/999",
        data={"title": "Ghost"},
        headers=auth_headers(author),
    )

    assert response.status_code == 404


def test_delete_blog_removes_comments_and_saves(author_client, harness):
    author = harness.store.add_user()
    reader = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    blog = harness.store.add_blog(author.id)
    other = harness.store.add_blog(author.id, title="Another post")
    harness.store.add_comment(blog.id, reader.id)
    harness.store.add_save(reader.id, blog.id)
    kept_comment = harness.store.add_comment(other.id, reader.id)

    response = author_client.delete(f"/api/v1/blog/{blog.id}", headers=auth_headers(author))

    assert response.status_code == 200
    assert response.json() == {"message": "Blog Deleted"}
    assert list(harness.store.blogs) == [other.id]
    assert list(harness.store.comments) == [kept_comment.id]
    assert harness.store.saves == {}
    assert harness.publisher.events == [["blogs:*", f"blog:{blog.id}"]]


def test_delete_blog_by_other_user_is_forbidden(author_client, harness):
    author = harness.store.add_user()
    intruder = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    blog = harness.store.add_blog(author.id)

    response = author_client.delete(f"/api/v1/blog/{blog.id}", headers=auth_headers(intruder))

    assert response.status_code == 403
    assert blog.id in harness.store.blogs


def test_delete_missing_blog(author_client, harness):
    author = harness.store.add_user()

    response = author_client.delete("/api/v1/blog/999", headers=auth_headers(author))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_ids_beyond_integer_range_are_not_found(author_client, harness):
    author = harness.store.add_user()
    author_app.dependency_overrides[get_author_service] = lambda: AuthorService(
        UnreachableSession(), harness.storage, harness.publisher
    )

    updated = author_client.post(
        "/api/v1/blog/2147483648", data={"title": "New"}, headers=auth_headers(author)
    )
    deleted = author_client.delete("/api/v1/blog/2147483648", headers=auth_headers(author))

    assert updated.status_code == 404
    assert deleted.status_code == 404
    assert harness.publisher.events == []
