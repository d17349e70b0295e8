"""
Document model backing the ORM document store.

Each row is one JSON document in a named collection.
"""
import uuid

from django.db import models


def new_document_key():
    """Generate an opaque document key."""
    return uuid.uuid4().hex


class Document(models.Model):
    """
    Schemaless JSON document.

    The store only knows collections, keys and JSON payloads. Field
    structure is validated by the repository that owns the collection.
    """

    key = models.CharField(
        max_length=32,
        primary_key=True,
        default=new_document_key,
        editable=False,
    )
    collection = models.CharField(max_length=100, db_index=True)
    data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["collection", "-created_at"]
        indexes = [
            models.Index(fields=["collection", "-created_at"]),
        ]

    def __str__(self):
        return f"{self.collection}/{self.key}"

    @property
    def preview(self):
        """Return a short title-like label for admin display."""
        label = str(self.data.get("title", "")) if isinstance(self.data, dict) else ""
        if len(label) > 50:
            return label[:50] + "..."
        return label
