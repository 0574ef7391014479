import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from conftest import FakeSavedBlogRepository, FakeUserRepository, auth_headers
from inkpost.api.dependencies.services import get_auth_service, get_saved_blog_service
from inkpost.api.main import blog_app, user_app
from inkpost.shared.core.exceptions import ConflictError


def unique_violation(table):
    return IntegrityError(f"INSERT INTO {table}", {}, Exception("duplicate key value"))


class SaveRacedRepository(FakeSavedBlogRepository):
    """Another request stores the same bookmark between check and insert."""

    async def create(self, **fields):
        self.store.add_save(**fields)
        raise unique_violation("saved_blogs")


class SignUpRacedRepository(FakeUserRepository):
    """Another first sign-in creates the account between check and insert."""

    async def create(self, **fields):
        self.store.add_user(**fields)
        raise unique_violation("users")


class EmailTakenRepository(FakeUserRepository):
    """The insert conflicts but the winning row is not visible yet."""

    async def create(self, **fields):
        raise unique_violation("users")


def test_concurrent_save_keeps_single_bookmark(harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)
    service = harness.saved_blog_service()
    service.repo = SaveRacedRepository(harness.store)

    message, saved = asyncio.run(service.toggle_save(str(reader.id), blog.id))

    assert (message, saved) == ("Blog Saved", True)
    assert len(harness.store.saves) == 1
    assert harness.session.savepoint_rollbacks == 1


def test_plain_save_runs_in_savepoint(harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)

    asyncio.run(harness.saved_blog_service().toggle_save(str(reader.id), blog.id))

    assert harness.session.savepoints == 1
    assert harness.session.savepoint_rollbacks == 0


def test_concurrent_first_sign_in_uses_the_winning_account(harness):
    service = harness.auth_service()
    service.repo = SignUpRacedRepository(harness.store)

    user, token, _ = asyncio.run(service.login_with_google("code-ada"))

    assert user.email == "ada@inkpost.io"
    assert token
    assert len(harness.store.users) == 1
    assert harness.session.savepoint_rollbacks == 1


def test_unreadable_conflicting_account_is_a_conflict(harness):
    service = harness.auth_service()
    service.repo = EmailTakenRepository(harness.store)

    with pytest.raises(ConflictError):
        asyncio.run(service.login_with_google("code-ada"))


def test_login_conflict_returns_409(user_client, harness):
    service = harness.auth_service()
    service.repo = EmailTakenRepository(harness.store)
    user_app.dependency_overrides[get_auth_service] = lambda: service

    response = user_client.post("/api/v1/login", json={"code": "code-ada"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_concurrent_save_over_http(blog_client, harness):
    reader = harness.store.add_user()
    blog = harness.store.add_blog(reader.id)

    def raced_service():
        service = harness.saved_blog_service()
        service.repo = SaveRacedRepository(harness.store)
        return service

    blog_app.dependency_overrides[get_saved_blog_service] = raced_service

    response = blog_client.post(f"/api/v1/save/{blog.id}", headers=auth_headers(reader))

    assert response.status_code == 200
    assert response.json() == {"message": "Blog Saved", "saved": True}
