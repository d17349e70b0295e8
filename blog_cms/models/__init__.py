"""
Models for django-blog-cms.

    from blog_cms.models import Document
"""
from .documents import Document

__all__ = [
    "Document",
]
