import fnmatch
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from inkpost.api.dependencies.services import (
    get_auth_service,
    get_author_service,
    get_blog_service,
    get_comment_service,
    get_saved_blog_service,
    get_user_service,
)
from inkpost.api.main import author_app, blog_app, user_app
from inkpost.config.settings import settings
from inkpost.shared.adapters.google_oauth_adapter import GoogleProfile
from inkpost.shared.adapters.storage_adapter import StorageAdapter
from inkpost.shared.core.exceptions import AuthenticationError
from inkpost.shared.models import Blog, Comment, SavedBlog, User
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.services import (
    AuthService,
    AuthorService,
    BlogService,
    CommentService,
    SavedBlogService,
    UserService,
)
from inkpost.shared.utils.security import SecurityUtils


BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)
USER_DEFAULTS = ("image", "instagram", "facebook", "linkedin", "bio")


# ═══════════════════════════════════════════════════════════════════════════════
# IN-MEMORY PERSISTENCE
# ═══════════════════════════════════════════════════════════════════════════════


class FakeSavepoint:
    def __init__(self, session):
        self.session = session

    async def __aenter__(self):
        self.session.savepoints += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.session.savepoint_rollbacks += 1
        return False


class FakeSession:
    def __init__(self):
        self.commits = 0
        self.savepoints = 0
        self.savepoint_rollbacks = 0

    def begin_nested(self):
        return FakeSavepoint(self)

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        pass

    async def close(self):
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class UnreachableSession:
    """Fails the test if a query is issued."""

    async def execute(self, *args, **kwargs):
        raise AssertionError("no query expected")


class Store:
    """Rows of every table, keyed by primary key."""

    def __init__(self):
        self.users = {}
        self.blogs = {}
        self.comments = {}
        self.saves = {}
        self._ids = {"blogs": 0, "comments": 0, "saves": 0}
        self._clock = 0

    def next_id(self, table):
        self._ids[table] += 1
        return self._ids[table]

    def now(self):
        self._clock += 1
        return BASE_TIME + timedelta(minutes=self._clock)

    def add_user(self, name="Ada Lovelace", email="ada@inkpost.io", **fields):
        for field in USER_DEFAULTS:
            fields.setdefault(field, "")
        user = User(
            id=fields.pop("id", uuid.uuid4()),
            name=name,
            email=email,
            created_at=self.now(),
            updated_at=None,
            **fields,
        )
        self.users[user.id] = user
        return user

    def add_blog(self, author, title="Caching without tears", **fields):
        fields.setdefault("description", "Read-through caches in practice")
        fields.setdefault("blogcontent", "<p>Body</p>")
        fields.setdefault("image", "https://cdn.inkpost.io/blogs/cover.png")
        fields.setdefault("category", BlogCategory.TECHNOLOGY)
        blog = Blog(
            id=self.next_id("blogs"),
            title=title,
            author=str(author),
            created_at=self.now(),
            **fields,
        )
        self.blogs[blog.id] = blog
        return blog

    def add_comment(self, blog_id, user_id, username="Ada Lovelace", comment="Nice post"):
        row = Comment(
            id=self.next_id("comments"),
            comment=comment,
            user_id=str(user_id),
            username=username,
            blog_id=blog_id,
            created_at=self.now(),
        )
        self.comments[row.id] = row
        return row

    def add_save(self, user_id, blog_id):
        row = SavedBlog(
            id=self.next_id("saves"),
            user_id=str(user_id),
            blog_id=blog_id,
            created_at=self.now(),
        )
        self.saves[row.id] = row
        return row


def _apply_update(instance, fields):
    for field, value in fields.items():
        if value is not None:
            setattr(instance, field, value)
    return instance


def _newest_first(rows):
    return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)


class FakeUserRepository:
    def __init__(self, store):
        self.store = store

    async def get(self, record_id):
        return self.store.users.get(record_id)

    async def get_by_email(self, email):
        return next((u for u in self.store.users.values() if u.email == email), None)

    async def create(self, **fields):
        return self.store.add_user(**fields)

    async def update(self, record_id, **fields):
        user = self.store.users.get(record_id)
        if user is None:
            return None
        return _apply_update(user, fields)


class FakeBlogRepository:
    def __init__(self, store):
        self.store = store

    async def get(self, record_id):
        return self.store.blogs.get(record_id)

    async def exists(self, record_id):
        return record_id in self.store.blogs

    async def create(self, **fields):
        author = fields.pop("author")
        title = fields.pop("title")
        return self.store.add_blog(author, title=title, **fields)

    async def update(self, record_id, **fields):
        blog = self.store.blogs.get(record_id)
        if blog is None:
            return None
        return _apply_update(blog, fields)

    async def search(self, search_query="", category=None):
        needle = (search_query or "").lower()
        rows = [
            blog
            for blog in self.store.blogs.values()
            if (needle in blog.title.lower() or needle in blog.description.lower())
            and (category is None or blog.category == category)
        ]
        return _newest_first(rows)

    async def delete_with_children(self, blog_id):
        if blog_id not in self.store.blogs:
            return False
        for table in (self.store.comments, self.store.saves):
            for row_id in [k for k, row in table.items() if row.blog_id == blog_id]:
                del table[row_id]
        del self.store.blogs[blog_id]
        return True


class FakeCommentRepository:
    def __init__(self, store):
        self.store = store

    async def get(self, record_id):
        return self.store.comments.get(record_id)

    async def create(self, **fields):
        return self.store.add_comment(**fields)

    async def delete(self, record_id):
        return self.store.comments.pop(record_id, None) is not None

    async def list_for_blog(self, blog_id):
        return _newest_first(c for c in self.store.comments.values() if c.blog_id == blog_id)


class FakeSavedBlogRepository:
    def __init__(self, store):
        self.store = store

    async def get_user_save(self, user_id, blog_id):
        return next(
            (s for s in self.store.saves.values() if s.user_id == user_id and s.blog_id == blog_id),
            None,
        )

    async def create(self, **fields):
        return self.store.add_save(**fields)

    async def delete(self, record_id):
        return self.store.saves.pop(record_id, None) is not None

    async def list_for_user(self, user_id):
        return _newest_first(s for s in self.store.saves.values() if s.user_id == user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# ADAPTER FAKES
# ═══════════════════════════════════════════════════════════════════════════════


class FakeCache:
    """Dict-backed stand-in for RedisAdapter."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.reads = []

    async def get_json(self, key):
        self.reads.append(key)
        return self.data.get(key)

    async def set_json(self, key, value, ttl=None):
        self.data[key] = value
        self.ttls[key] = ttl
        return True

    async def delete_pattern(self, pattern):
        matched = [key for key in self.data if fnmatch.fnmatchcase(key, pattern)]
        for key in matched:
            del self.data[key]
        return len(matched)

    async def ping(self):
        return True

    async def close(self):
        pass


class FakePublisher:
    """Stand-in for SQSAdapter on the publishing side."""

    def __init__(self, error=None):
        self.events = []
        self.error = error

    def send_cache_invalidation(self, keys):
        if self.error is not None:
            raise self.error
        self.events.append(list(keys))
        return f"msg-{len(self.events)}"


class FakeS3Client:
    def __init__(self):
        self.objects = {}

    def put_object(self, Bucket, Key, Body, ContentType):
        self.objects[Key] = {"bucket": Bucket, "body": Body, "content_type": ContentType}
        return {"ETag": '"etag"'}


class FakeGoogle:
    """Accepts any code except "bad-code"; the code picks the account."""

    def __init__(self):
        self.profiles = {
            "code-ada": GoogleProfile(
                email="ada@inkpost.io",
                name="Ada Lovelace",
                picture="https://lh3.googleusercontent.com/a/ada",
            ),
            "code-grace": GoogleProfile(
                email="grace@inkpost.io",
                name="Grace Hopper",
                picture="https://lh3.googleusercontent.com/a/grace",
            ),
        }

    async def exchange_code(self, code):
        if code not in self.profiles:
            raise AuthenticationError("Invalid authorization code")
        return self.profiles[code]


class FakeUserClient:
    def __init__(self, store, error=None):
        self.store = store
        self.error = error
        self.calls = []

    async def get_user(self, user_id):
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        user = self.store.users.get(uuid.UUID(user_id))
        if user is None:
            return None
        return {
            "id": str(user.id),
            "name": user.name,
            "email": user.email,
            "image": user.image,
            "instagram": user.instagram,
            "facebook": user.facebook,
            "linkedin": user.linkedin,
            "bio": user.bio,
            "created_at": user.created_at.isoformat(),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE BUILDERS
# ═══════════════════════════════════════════════════════════════════════════════


class Harness:
    """Fakes shared by one test, plus services wired to them."""

    def __init__(self):
        self.store = Store()
        self.session = FakeSession()
        self.cache = FakeCache()
        self.publisher = FakePublisher()
        self.s3 = FakeS3Client()
        self.storage = StorageAdapter(
            bucket="inkpost-test",
            region="us-east-1",
            public_base_url="https://cdn.inkpost.io",
            client=self.s3,
        )
        self.google = FakeGoogle()
        self.user_client = FakeUserClient(self.store)

    def auth_service(self):
        service = AuthService(self.session, self.google)
        service.repo = FakeUserRepository(self.store)
        return service

    def user_service(self):
        service = UserService(self.session, self.storage)
        service.repo = FakeUserRepository(self.store)
        return service

    def author_service(self):
        service = AuthorService(self.session, self.storage, self.publisher)
        service.repo = FakeBlogRepository(self.store)
        return service

    def blog_service(self):
        service = BlogService(self.session, self.cache, self.user_client)
        service.repo = FakeBlogRepository(self.store)
        return service

    def comment_service(self):
        service = CommentService(self.session)
        service.blog_repo = FakeBlogRepository(self.store)
        service.repo = FakeCommentRepository(self.store)
        return service

    def saved_blog_service(self):
        service = SavedBlogService(self.session)
        service.blog_repo = FakeBlogRepository(self.store)
        service.repo = FakeSavedBlogRepository(self.store)
        return service


def auth_headers(user):
    token = SecurityUtils.create_access_token(
        data={"user_id": str(user.id), "email": user.email, "name": user.name},
        secret_key=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    return {"Authorization": f"Bearer {token}"}


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def harness():
    return Harness()


@pytest.fixture
def user_client(harness):
    user_app.dependency_overrides[get_auth_service] = harness.auth_service
    user_app.dependency_overrides[get_user_service] = harness.user_service
    yield TestClient(user_app)
    user_app.dependency_overrides.clear()


@pytest.fixture
def author_client(harness):
    author_app.dependency_overrides[get_author_service] = harness.author_service
    yield TestClient(author_app)
    author_app.dependency_overrides.clear()


@pytest.fixture
def blog_client(harness):
    blog_app.dependency_overrides[get_blog_service] = harness.blog_service
    blog_app.dependency_overrides[get_comment_service] = harness.comment_service
    blog_app.dependency_overrides[get_saved_blog_service] = harness.saved_blog_service
    yield TestClient(blog_app)
    blog_app.dependency_overrides.clear()
