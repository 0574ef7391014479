from conftest import UnreachableSession, auth_headers
from inkpost.api.dependencies.services import (
    get_blog_service,
    get_comment_service,
    get_saved_blog_service,
)
from inkpost.api.main import blog_app
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.services import BlogService, CommentService, SavedBlogService


def test_list_blogs_newest_first_and_cached(blog_client, harness):
    author = harness.store.add_user()
    older = harness.store.add_blog(author.id, title="Older")
    newer = harness.store.add_blog(author.id, title="Newer")

    response = blog_client.get("/api/v1/blog/all")

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [newer.id, older.id]
    assert harness.cache.data["blogs::"] == response.json()
    assert harness.cache.ttls["blogs::"] == 3600


def test_list_blogs_served_from_cache(blog_client, harness):
    author = harness.store.add_user()
    harness.store.add_blog(author.id)
    blog_client.get("/api/v1/blog/all")

    harness.store.add_blog(author.id, title="Written after caching")
    response = blog_client.get("/api/v1/blog/all")

    assert len(response.json()) == 1


def test_list_blogs_search_and_category(blog_client, harness):
    author = harness.store.add_user()
    harness.store.add_blog(author.id, title="Backpacking Peru", category=BlogCategory.TRAVEL)
    harness.store.add_blog(
        author.id,
        title="Budgeting",
        description="Saving for a trip to PERU",
        category=BlogCategory.FINANCE,
    )
    harness.store.add_blog(author.id, title="Python tips")

    by_text = blog_client.get("/api/v1/blog/all", params={"searchQuery": "peru"})
    by_both = blog_client.get(
        "/api/v1/blog/all",
        params={"searchQuery": "peru", "category": "Travel"},
    )

    assert [b["title"] for b in by_text.json()] == ["Budgeting", "Backpacking Peru"]
    assert [b["title"] for b in by_both.json()] == ["Backpacking Peru"]
    assert "blogs:peru:" in harness.cache.data
    assert "blogs:peru:Travel" in harness.cache.data


def test_list_blogs_unknown_category(blog_client):
    response = blog_client.get("/api/v1/blog/all", params={"category": "Gardening"})

    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == "category"


def test_get_blog_with_author(blog_client, harness):
    author = harness.store.add_user(bio="Engines")
    blog = harness.store.add_blog(author.id)

    response = blog_client.get(f"/api/v1/blog/{blog.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["blog"]["id"] == blog.id
    assert body["author"]["id"] == str(author.id)
    assert body["author"]["bio"] == "Engines"
    assert harness.cache.data[f"blog:{blog.id}"]["author"]["name"] == "Ada Lovelace"


def test_get_blog_cache_hit_skips_user_service(blog_client, harness):
    author = harness.store.add_user()
    blog = harness.store.add_blog(author.id)

    blog_client.get(f"/api/v1/blog/{blog.id}")
    blog_client.get(f"/api/v1/blog/{blog.id}")

    assert harness.user_client.calls == [str(author.id)]


def test_get_missing_blog_is_not_cached(blog_client, harness):
    response = blog_client.get("/api/v1/blog/404")

    assert response.status_code == 404
    assert "blog:404" not in harness.cache.data


def test_comments_flow(blog_client, harness):
    author = harness.store.add_user()
    reader = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    blog = harness.store.add_blog(author.id)

    first = blog_client.post(
        f"/api/v1/comment/{blog.id}",
        json={"comment": "First!"},
        headers=auth_headers(reader),
    )
    second = blog_client.post(
        f"/api/v1/comment/{blog.id}",
        json={"comment": "Great read"},
        headers=auth_headers(author),
    )

    assert first.status_code == 201
    assert first.json()["message"] == "Comment Added"
    assert first.json()["comment"]["username"] == "Grace Hopper"
    assert first.json()["comment"]["user_id"] == str(reader.id)

    listing = blog_client.get(f"/api/v1/comment/{blog.id}")
    assert [c["comment"] for c in listing.json()] == ["Great read", "First!"]
    assert second.json()["comment"]["blog_id"] == blog.id


def test_comment_on_missing_blog(blog_client, harness):
    reader = harness.store.add_user()

    response = blog_client.post(
        "/api/v1/comment/999",
        json={"comment": "Hello?"},
        headers=auth_headers(reader),
    )

    assert response.status_code == 404
    assert harness.store.comments == {}


def test_comment_requires_auth_and_text(blog_client, harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)

    anonymous = blog_client.post(f"/api/v1/comment/{blog.id}", json={"comment": "Hi"})
    empty = blog_client.post(
        f"/api/v1/comment/{blog.id}",
        json={"comment": ""},
        headers=auth_headers(reader),
    )

    assert anonymous.status_code == 401
    assert empty.status_code == 422


def test_list_comments_of_unknown_blog_is_empty(blog_client):
    response = blog_client.get("/api/v1/comment/12345")

    assert response.status_code == 200
    assert response.json() == []


def test_delete_comment_only_by_its_writer(blog_client, harness):
    author = harness.store.add_user()
    reader = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    blog = harness.store.add_blog(author.id)
    comment = harness.store.add_comment(blog.id, reader.id, username="Grace Hopper")

    forbidden = blog_client.delete(f"/api/v1/comment/{comment.id}", headers=auth_headers(author))
    allowed = blog_client.delete(f"/api/v1/comment/{comment.id}", headers=auth_headers(reader))
    gone = blog_client.delete(f"/api/v1/comment/{comment.id}", headers=auth_headers(reader))

    assert forbidden.status_code == 403
    assert allowed.status_code == 200
    assert allowed.json() == {"message": "Comment Deleted"}
    assert gone.status_code == 404


def test_save_toggle(blog_client, harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)

    saved = blog_client.post(f"/api/v1/save/{blog.id}", headers=auth_headers(reader))
    assert saved.json() == {"message": "Blog Saved", "saved": True}
    assert len(harness.store.saves) == 1

    unsaved = blog_client.post(f"/api/v1/save/{blog.id}", headers=auth_headers(reader))
    assert unsaved.json() == {"message": "Blog Unsaved", "saved": False}
    assert harness.store.saves == {}


def test_save_missing_blog(blog_client, harness):
    reader = harness.store.add_user()

    response = blog_client.post("/api/v1/save/999", headers=auth_headers(reader))

    assert response.status_code == 404


def test_saved_blogs_lists_only_callers_saves(blog_client, harness):
    ada = harness.store.add_user()
    grace = harness.store.add_user(name="Grace Hopper", email="grace@inkpost.io")
    first = harness.store.add_blog(ada.id)
    second = harness.store.add_blog(ada.id, title="Second")
    harness.store.add_save(str(ada.id), first.id)
    harness.store.add_save(str(ada.id), second.id)
    harness.store.add_save(str(grace.id), first.id)

    response = blog_client.get("/api/v1/blog/saved/all", headers=auth_headers(ada))

    assert response.status_code == 200
    assert [s["blog_id"] for s in response.json()] == [second.id, first.id]
    assert all(s["user_id"] == str(ada.id) for s in response.json())


def test_saved_blogs_requires_auth(blog_client):
    assert blog_client.get("/api/v1/blog/saved/all").status_code == 401


def test_blog_service_health(blog_client):
    assert blog_client.get("/health").json()["service"] == "inkpost-blog"


def test_ids_beyond_integer_range_are_not_found(blog_client, harness):
    reader = harness.store.add_user()
    blog_app.dependency_overrides[get_blog_service] = lambda: BlogService(
        UnreachableSession(), harness.cache, harness.user_client
    )
    blog_app.dependency_overrides[get_comment_service] = lambda: CommentService(
        UnreachableSession()
    )
    blog_app.dependency_overrides[get_saved_blog_service] = lambda: SavedBlogService(
        UnreachableSession()
    )
    too_big = "2147483648"
    headers = auth_headers(reader)

    assert blog_client.get(f"/api/v1/blog/{too_big}").status_code == 404
    assert blog_client.get(f"/api/v1/comment/{too_big}").json() == []
    assert blog_client.post(
        f"/api/v1/comment/{too_big}", json={"comment": "Hi"}, headers=headers
    ).status_code == 404
    assert blog_client.delete(f"/api/v1/comment/{too_big}", headers=headers).status_code == 404
    assert blog_client.post(f"/api/v1/save/{too_big}", headers=headers).status_code == 404
