"""
Tests for the image upload adapter.
"""
import re

import pytest
import requests

from blog_cms.exceptions import UploadFailed
from blog_cms.uploads import content_image_path, cover_image_path


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class TestUploadPaths:
    """Tests for destination path hints."""

    def test_cover_path(self):
        assert re.fullmatch(r"blog-covers/\d+-my-photo\.jpg", cover_image_path("My Photo.JPG"))

    def test_content_path(self):
        assert re.fullmatch(r"blog-images/\d+-diagram\.png", content_image_path("diagram.png"))

    def test_unsafe_name(self):
        path = cover_image_path("../../etc/passwd")
        assert re.fullmatch(r"blog-covers/\d+-passwd", path)

    def test_missing_name(self):
        assert re.fullmatch(r"blog-covers/\d+-image", cover_image_path(""))


class TestImageUploader:
    """Tests for ImageUploader."""

    def test_upload_returns_public_url(self, uploader):
        url = uploader.upload(b"\x89PNG data", "blog-covers/1-cover.png")

        assert url == "https://cdn.example.com/blog-covers/1-cover.png"
        with uploader.storage.open("blog-covers/1-cover.png") as saved:
            assert saved.read() == b"\x89PNG data"

    def test_backend_error_raises_upload_failed(self, broken_uploader):
        with pytest.raises(UploadFailed) as excinfo:
            broken_uploader.upload(b"data", "blog-covers/1-cover.png")

        assert isinstance(excinfo.value.__cause__, OSError)

    def test_upload_from_url(self, uploader, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(b"remote image")

        monkeypatch.setattr("blog_cms.uploads.requests.get", fake_get)

        url = uploader.upload_from_url("https://images.example.org/photos/sunset.jpg?w=800")

        assert calls == [("https://images.example.org/photos/sunset.jpg?w=800", 10)]
        assert re.fullmatch(r"https://cdn\.example\.com/blog-covers/\d+-sunset\.jpg", url)

    def test_upload_from_url_http_error(self, uploader, monkeypatch):
        monkeypatch.setattr(
            "blog_cms.uploads.requests.get",
            lambda url, timeout: FakeResponse(status_code=404),
        )

        with pytest.raises(UploadFailed):
            uploader.upload_from_url("https://images.example.org/missing.jpg")

    def test_upload_from_url_connection_error(self, uploader, monkeypatch):
        def fake_get(url, timeout):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr("blog_cms.uploads.requests.get", fake_get)

        with pytest.raises(UploadFailed):
            uploader.upload_from_url("https://images.example.org/photo.jpg")
