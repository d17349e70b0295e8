"""
Post repository: CRUD for posts over a document store.

Every read round-trips to the store. Timestamps are assigned here and
nowhere else.
"""
import logging
from datetime import timedelta

import pydantic
from django.utils import timezone

from .conf import blog_settings, get_document_store
from .exceptions import NotFound, ValidationError
from .schemas import Post, PostCreate, PostStatus, PostUpdate, format_timestamp

logger = logging.getLogger(__name__)


def _validation_error(exc):
    """Turn the first pydantic error into a ValidationError."""
    first = exc.errors()[0]
    field = first["loc"][0] if first.get("loc") else None
    message = first["msg"].removeprefix("Value error, ")
    if field:
        message = f"{field}: {message}"
    return ValidationError(message, field=field)


def _validated(schema, payload):
    if isinstance(payload, pydantic.BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise _validation_error(exc) from exc


class PostRepository:
    """
    Create, read, update and delete posts.

    Args:
        store: DocumentStore instance; defaults to the configured backend
        collection: collection name; defaults to the COLLECTION setting
    """

    def __init__(self, store=None, collection=None):
        self.store = store if store is not None else get_document_store()
        self.collection = collection or blog_settings.COLLECTION

    def create(self, post):
        """
        Store a new post.

        Args:
            post: mapping or PostFields with at least title and slug

        Returns:
            The identifier assigned by the store
        """
        fields = _validated(PostCreate, post)
        stamp = format_timestamp(timezone.now())
        document = fields.model_dump(mode="json")
        document["created_at"] = stamp
        document["updated_at"] = stamp

        post_id = self.store.add(self.collection, document)
        logger.info("Created post %s (slug=%s, status=%s)", post_id, fields.slug, fields.status.value)
        return post_id

    def get_by_id(self, post_id):
        """Return the post with this id, or None."""
        data = self.store.get(self.collection, post_id)
        if data is None:
            return None
        return self._to_post(post_id, data)

    def get_by_slug(self, slug):
        """Return the newest post with this slug in any status, or None."""
        return self._first([("slug", "==", slug)])

    def get_published_by_slug(self, slug):
        """Return the newest published post with this slug, or None."""
        return self._first([
            ("slug", "==", slug),
            ("status", "==", PostStatus.PUBLISHED.value),
        ])

    def list_all(self):
        """Return every post, newest first."""
        return self._query([])

    def list_published(self):
        """Return published posts, newest first."""
        return self._query([("status", "==", PostStatus.PUBLISHED.value)])

    def update(self, post_id, partial):
        """
        Merge supplied fields into an existing post.

        The slug is never recomputed and updated_at always advances past
        its previous value.

        Returns:
            The updated Post
        """
        changes = _validated(PostUpdate, partial).changes()
        current = self.get_by_id(post_id)
        if current is None:
            raise NotFound(f"Post {post_id} does not exist")

        changes["updated_at"] = format_timestamp(self._next_modified(current))
        self.store.update(self.collection, post_id, changes)
        logger.info("Updated post %s (fields=%s)", post_id, ",".join(sorted(changes)))

        updated = self.get_by_id(post_id)
        if updated is None:
            raise NotFound(f"Post {post_id} does not exist")
        return updated

    def delete(self, post_id):
        """Delete a post; raises NotFound when the id does not resolve."""
        self.store.delete(self.collection, post_id)
        logger.info("Deleted post %s", post_id)

    def _next_modified(self, current):
        now = timezone.now()
        if now <= current.updated_at:
            now = current.updated_at + timedelta(microseconds=1)
        return now

    def _first(self, where):
        posts = self._query(where)
        return posts[0] if posts else None

    def _query(self, where):
        results = self.store.query(
            self.collection,
            where=where,
            order_by="created_at",
            descending=True,
        )
        return [self._to_post(key, data) for key, data in results]

    def _to_post(self, post_id, data):
        try:
            return Post.from_document(post_id, data)
        except pydantic.ValidationError as exc:
            logger.warning("Stored post %s failed validation: %s", post_id, exc)
            raise ValidationError(f"Stored post {post_id} is malformed") from exc
