"""
Tests for the Cloudinary media adapter. The Cloudinary SDK calls are
monkeypatched; nothing leaves the process.
"""

import pytest

import adapters.media_adapter as media_adapter
from adapters.media_adapter import CloudinaryUploader, UPLOAD_TRANSFORMATION
from app.exceptions import UpstreamError


@pytest.fixture
def configured(monkeypatch):
    seen = {}
    monkeypatch.setattr(
        media_adapter.cloudinary, "config", lambda **kwargs: seen.update(kwargs)
    )
    uploader = CloudinaryUploader("recipebox", "123456789012", "shh")
    uploader.connect()
    return uploader, seen


def test_connect_configures_sdk(configured):
    uploader, seen = configured

    assert uploader.is_configured
    assert seen["cloud_name"] == "recipebox"
    assert seen["secure"] is True


def test_missing_credentials_disable_uploads(monkeypatch):
    calls = []
    monkeypatch.setattr(media_adapter.cloudinary, "config", lambda **kw: calls.append(kw))
    uploader = CloudinaryUploader(cloud_name="recipebox")

    uploader.connect()

    assert not uploader.is_configured
    assert calls == []
    with pytest.raises(UpstreamError, match="not configured"):
        uploader.upload(b"img", "recipe-images")


def test_upload_returns_secure_url(configured, monkeypatch):
    uploader, _ = configured
    captured = {}

    def fake_upload(file, **options):
        captured["bytes"] = file.read()
        captured.update(options)
        return {"secure_url": "https://res.cloudinary.com/recipebox/image/upload/x.jpg"}

    monkeypatch.setattr(media_adapter.cloudinary.uploader, "upload", fake_upload)

    url = uploader.upload(b"jpegbytes", "recipe-images")

    assert url == "https://res.cloudinary.com/recipebox/image/upload/x.jpg"
    assert captured["bytes"] == b"jpegbytes"
    assert captured["folder"] == "recipe-images"
    assert captured["resource_type"] == "image"
    assert captured["transformation"] == UPLOAD_TRANSFORMATION


def test_upload_failure_becomes_upstream_error(configured, monkeypatch):
    uploader, _ = configured

    def broken_upload(file, **options):
        raise RuntimeError("503 from cloudinary")

    monkeypatch.setattr(media_adapter.cloudinary.uploader, "upload", broken_upload)

    with pytest.raises(UpstreamError) as excinfo:
        uploader.upload(b"jpegbytes", "profile-images")
    assert excinfo.value.http_status == 502
    assert "503 from cloudinary" in excinfo.value.details


def test_upload_without_url_is_an_error(configured, monkeypatch):
    uploader, _ = configured
    monkeypatch.setattr(media_adapter.cloudinary.uploader, "upload", lambda f, **o: {})

    with pytest.raises(UpstreamError, match="Failed to upload image"):
        uploader.upload(b"jpegbytes", "recipe-images")


def test_close_disables_uploads(configured):
    uploader, _ = configured
    uploader.close()

    with pytest.raises(UpstreamError):
        uploader.upload(b"img", "recipe-images")
