"""
Shared fixtures for django-blog-cms tests.
"""
from datetime import datetime, timezone

import pytest
from django.contrib.auth import get_user_model
from django.core.files.storage import InMemoryStorage

from blog_cms.exceptions import StoreUnavailable
from blog_cms.repository import PostRepository
from blog_cms.schemas import Post, PostStatus
from blog_cms.stores import DocumentStore, ModelDocumentStore
from blog_cms.uploads import ImageUploader

User = get_user_model()


class BrokenStore(DocumentStore):
    """Document store whose backend is always down."""

    def _fail(self, *args, **kwargs):
        raise StoreUnavailable("Document store is down")

    add = get = update = delete = query = _fail


class BrokenStorage(InMemoryStorage):
    """Storage backend that fails every write."""

    def _save(self, name, content):
        raise OSError("bucket unavailable")


@pytest.fixture
def store(db):
    return ModelDocumentStore()


@pytest.fixture
def repository(store):
    return PostRepository(store=store)


@pytest.fixture
def broken_repository():
    return PostRepository(store=BrokenStore())


@pytest.fixture
def uploader():
    return ImageUploader(storage=InMemoryStorage(base_url="https://cdn.example.com/"))


@pytest.fixture
def broken_uploader():
    return ImageUploader(storage=BrokenStorage())


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def admin_client(client, user):
    """Django test client logged in as the test user."""
    client.force_login(user)
    return client


@pytest.fixture
def post_data():
    return {
        "title": "Hello World",
        "slug": "hello-world",
        "content": "<p>My <strong>first</strong> post!</p>",
        "meta_title": "Hello SEO",
        "meta_description": "A short description of the first post.",
        "cover_image": "https://cdn.example.com/cover.jpg",
        "status": "published",
    }


@pytest.fixture
def make_post():
    """Build an in-memory Post without touching the store."""

    def _make_post(**overrides):
        stamp = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        fields = {
            "id": "abc123",
            "title": "Hello World",
            "slug": "hello-world",
            "content": "<p>Body</p>",
            "meta_title": "",
            "meta_description": "Description",
            "cover_image": "",
            "status": PostStatus.PUBLISHED,
            "created_at": stamp,
            "updated_at": stamp,
        }
        fields.update(overrides)
        return Post(**fields)

    return _make_post
