import asyncio

import httpx
from botocore.exceptions import EndpointConnectionError

from inkpost.shared.adapters.user_service_client import UserServiceClient
from inkpost.shared.core.exceptions import ExternalServiceError


def test_author_lookup_failure_returns_blog_uncached(harness):
    author = harness.store.add_user()
    blog = harness.store.add_blog(author.id)
    harness.user_client.error = ExternalServiceError("user-service")

    payload = asyncio.run(harness.blog_service().get_blog(blog.id))

    assert payload["blog"]["id"] == blog.id
    assert payload["author"] is None
    assert f"blog:{blog.id}" not in harness.cache.data


def test_unknown_author_is_cached_as_none(harness):
    blog = harness.store.add_blog("3f1c1a52-7a53-4a0e-9a53-5c8f7e6f0d11")

    payload = asyncio.run(harness.blog_service().get_blog(blog.id))

    assert payload["author"] is None
    assert harness.cache.data[f"blog:{blog.id}"] == payload


def test_cached_listing_is_returned_verbatim(harness):
    harness.cache.data["blogs:rust:"] = [{"id": 7, "title": "From cache"}]

    blogs = asyncio.run(harness.blog_service().list_blogs(search_query="rust"))

    assert blogs == [{"id": 7, "title": "From cache"}]


def test_refresh_default_listing(harness):
    author = harness.store.add_user()
    harness.store.add_blog(author.id, title="One")
    harness.store.add_blog(author.id, title="Two")

    count = asyncio.run(harness.blog_service().refresh_default_listing())

    assert count == 2
    assert [b["title"] for b in harness.cache.data["blogs::"]] == ["Two", "One"]
    assert harness.cache.ttls["blogs::"] == 3600


def test_author_service_swallows_broker_connection_errors(harness):
    author = harness.store.add_user()
    harness.publisher.error = EndpointConnectionError(endpoint_url="https://sqs.us-east-1.amazonaws.com")

    blog = asyncio.run(
        harness.author_service().update_blog(
            blog_id=harness.store.add_blog(author.id).id,
            author_id=str(author.id),
            description="Updated while SQS was down",
        )
    )

    assert blog.description == "Updated while SQS was down"
    assert harness.session.commits == 1


def test_comment_keeps_username_from_time_of_writing(harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)
    service = harness.comment_service()

    asyncio.run(service.add_comment(blog.id, str(reader.id), "Ada", "Before rename"))
    reader.name = "Countess Ada"
    comments = asyncio.run(service.list_comments(blog.id))

    assert comments[0].username == "Ada"


def test_garbled_author_profile_falls_back_to_no_author(harness):
    author = harness.store.add_user()
    blog = harness.store.add_blog(author.id)
    service = harness.blog_service()
    service.user_client = UserServiceClient(
        base_url="http://users.internal",
        http_client=httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="oops"))
        ),
    )

    payload = asyncio.run(service.get_blog(blog.id))

    assert payload["blog"]["id"] == blog.id
    assert payload["author"] is None
    assert f"blog:{blog.id}" not in harness.cache.data
