"""
Image upload adapter.

Writes blobs to a Django storage backend and hands back their public URL.
No retries, no size or type checks beyond what the backend enforces.
"""
import logging
import os
import re
import time

import requests
from django.core.files.base import ContentFile

from .conf import blog_settings, get_storage
from .exceptions import UploadFailed
from .text import slugify

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"\.[a-z0-9]{1,10}")


def _upload_path(prefix, filename):
    """Build '<prefix><epoch-ms>-<safe filename>'."""
    base, ext = os.path.splitext(os.path.basename(filename or ""))
    name = slugify(base) or "image"
    ext = ext.lower() if _EXTENSION.fullmatch(ext.lower()) else ""
    return f"{prefix}{int(time.time() * 1000)}-{name}{ext}"


def cover_image_path(filename):
    """Destination hint for a post cover image."""
    return _upload_path(blog_settings.COVER_UPLOAD_PATH, filename)


def content_image_path(filename):
    """Destination hint for an image inserted into post content."""
    return _upload_path(blog_settings.CONTENT_UPLOAD_PATH, filename)


class ImageUploader:
    """
    Upload images to object storage.

    Args:
        storage: Django Storage instance; defaults to STORAGE_ALIAS
    """

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else get_storage()

    def upload(self, data, path):
        """
        Save bytes at path and return a public URL.

        Raises:
            UploadFailed: on any storage backend error
        """
        try:
            name = self.storage.save(path, ContentFile(data))
            url = self.storage.url(name)
        except Exception as exc:
            logger.exception("Image upload to %s failed", path)
            raise UploadFailed(f"Could not upload image to {path}") from exc

        logger.info("Uploaded image %s (%d bytes)", name, len(data))
        return url

    def upload_from_url(self, url, path=None):
        """
        Fetch an image from url and upload it.

        Args:
            url: remote image URL
            path: destination hint; defaults to a cover image path

        Raises:
            UploadFailed: when the fetch fails or the upload fails
        """
        try:
            response = requests.get(url, timeout=blog_settings.FETCH_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Fetching image %s failed: %s", url, exc)
            raise UploadFailed(f"Could not fetch image from {url}") from exc

        if path is None:
            path = cover_image_path(url.split("?")[0].rstrip("/").rsplit("/", 1)[-1])
        return self.upload(response.content, path)
