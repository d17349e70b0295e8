"""
Errors raised by django-blog-cms.

Views catch these at the call site and turn them into user-facing messages.
"""


class BlogError(Exception):
    """Base class for all blog_cms errors."""


class NotFound(BlogError):
    """The requested post or document does not exist."""


class StoreUnavailable(BlogError):
    """The document store failed to read or write."""


class UploadFailed(BlogError):
    """An image could not be fetched or written to object storage."""


class ValidationError(BlogError):
    """A post is missing a required field or carries an invalid value."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field
