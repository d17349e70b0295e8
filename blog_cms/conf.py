"""
Configuration settings for django-blog-cms.

Override these in your Django settings.py:

    BLOG_CMS = {
        'SITE_URL': 'https://example.com',
        'COLLECTION': 'blogs',
        'STORAGE_ALIAS': 'default',
        ...
    }

The document store backend is configured by dotted path:

    BLOG_CMS = {
        'DOCUMENT_STORE': 'blog_cms.stores.ModelDocumentStore',
    }
"""
from django.conf import settings
from django.utils.module_loading import import_string

DEFAULTS = {
    # Document store
    "COLLECTION": "blogs",
    "DOCUMENT_STORE": "blog_cms.stores.ModelDocumentStore",

    # Object storage, an alias from Django's STORAGES setting
    "STORAGE_ALIAS": "default",
    "COVER_UPLOAD_PATH": "blog-covers/",
    "CONTENT_UPLOAD_PATH": "blog-images/",
    "FETCH_TIMEOUT": 10,

    # Site
    "SITE_URL": "",
    "SITE_NAME": "My Blog",
    "SITE_DESCRIPTION": "Thoughts, stories and ideas",

    # Rendering
    "CARD_DESCRIPTION_LENGTH": 160,

    # SEO
    "SLUG_MAX_LENGTH": 100,
}


class BlogCmsSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_cms.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_cms setting: {name}")

        user_settings = getattr(settings, "BLOG_CMS", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def site_url(self):
        """Return SITE_URL without a trailing slash."""
        return self.SITE_URL.rstrip("/")


blog_settings = BlogCmsSettings()


def get_document_store():
    """
    Instantiate the configured document store backend.

    Returns:
        DocumentStore instance built from the DOCUMENT_STORE dotted path
    """
    store_class = import_string(blog_settings.DOCUMENT_STORE)
    return store_class()


def get_storage():
    """Return the Django storage backend used for uploaded images."""
    from django.core.files.storage import storages

    return storages[blog_settings.STORAGE_ALIAS]
