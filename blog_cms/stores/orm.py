"""
Document store backed by the Django ORM.

Documents are rows of the Document model; filters and ordering run on
JSON key transforms so they stay in the database.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError
from django.db.models import Q
from django.db.models.fields.json import KeyTextTransform

from ..exceptions import NotFound, StoreUnavailable
from ..models import Document
from .base import OPERATORS, DocumentStore

logger = logging.getLogger(__name__)

LOOKUPS = {
    "==": "exact",
    "<": "lt",
    "<=": "lte",
    ">": "gt",
    ">=": "gte",
}


@contextmanager
def backend_errors(action, collection):
    """Convert database errors raised inside the block to StoreUnavailable."""
    try:
        yield
    except DatabaseError as exc:
        logger.exception("document store %s failed on collection %s", action, collection)
        raise StoreUnavailable(f"Document store {action} failed") from exc


def _check_field(field):
    if not field.isidentifier() or "__" in field:
        raise ValueError(f"Invalid document field name: {field!r}")
    return field


class ModelDocumentStore(DocumentStore):
    """Store JSON documents in the Document table."""

    def add(self, collection, data):
        with backend_errors("add", collection):
            document = Document.objects.create(collection=collection, data=dict(data))
        return document.key

    def get(self, collection, key):
        with backend_errors("get", collection):
            document = Document.objects.filter(collection=collection, key=key).first()
        if document is None:
            return None
        return dict(document.data)

    def update(self, collection, key, changes):
        with backend_errors("update", collection):
            document = Document.objects.filter(collection=collection, key=key).first()
            if document is None:
                raise NotFound(f"No document {key} in {collection}")
            document.data = {**document.data, **changes}
            document.save(update_fields=["data", "updated_at"])

    def delete(self, collection, key):
        with backend_errors("delete", collection):
            deleted, _ = Document.objects.filter(collection=collection, key=key).delete()
        if not deleted:
            raise NotFound(f"No document {key} in {collection}")

    def query(self, collection, where=(), order_by=None, descending=False):
        conditions = Q(collection=collection)
        for field, operator, value in where:
            if operator not in OPERATORS:
                raise ValueError(f"Unsupported operator: {operator!r}")
            lookup = f"data__{_check_field(field)}__{LOOKUPS[operator]}"
            conditions &= Q(**{lookup: value})

        with backend_errors("query", collection):
            queryset = Document.objects.filter(conditions)
            if order_by:
                sort_key = KeyTextTransform(_check_field(order_by), "data")
                queryset = queryset.order_by(sort_key.desc() if descending else sort_key.asc())
            return [(key, dict(data)) for key, data in queryset.values_list("key", "data")]
