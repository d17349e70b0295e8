"""
Document store backends for django-blog-cms.

    from blog_cms.stores import DocumentStore, ModelDocumentStore
"""
from .base import DocumentStore, OPERATORS
from .orm import ModelDocumentStore

__all__ = [
    "DocumentStore",
    "ModelDocumentStore",
    "OPERATORS",
]
