"""
Tests for hero video replacement, toggling and deletion.
"""
import logging

import pytest
from django.core.exceptions import ValidationError
from django.core.files.storage import InMemoryStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import IntegrityError, transaction

from videos import services
from videos.models import HeroVideo, HeroVideoQuerySet
from videos.services import (
    current_sources,
    delete_asset,
    replace_active_asset,
    toggle_asset_active,
)


def _clip(name="clip.mp4"):
    return SimpleUploadedFile(name, b"\x00\x00\x00\x18ftypmp42", content_type="video/mp4")


def _counts(category):
    qs = HeroVideo.objects.filter(category=category)
    return qs.filter(is_active=True).count(), qs.filter(is_active=False).count()


@pytest.mark.django_db
def test_repeated_uploads_keep_one_active():
    for i in range(3):
        replace_active_asset("desktop", _clip(f"d{i}.mp4"))
        assert _counts("desktop")[0] == 1
    assert _counts("desktop") == (1, 2)

    latest = replace_active_asset("desktop", _clip("d3.mp4"))
    assert _counts("desktop") == (1, 3)
    assert HeroVideo.objects.active().get(category="desktop") == latest


@pytest.mark.django_db
def test_upload_leaves_other_category_alone():
    mobile = replace_active_asset("mobile", _clip())
    replace_active_asset("desktop", _clip())
    mobile.refresh_from_db()
    assert mobile.is_active is True


@pytest.mark.django_db
def test_upload_records_metadata():
    video = replace_active_asset(
        "mobile", _clip("intro.mp4"), name="Intro", original_name="intro.mp4", size=12, mime_type="video/mp4"
    )
    assert video.name == "Intro"
    assert video.original_name == "intro.mp4"
    assert video.size == 12
    assert video.mime_type == "video/mp4"
    assert video.file.name.startswith("videos/mobile/intro-")


@pytest.mark.django_db
def test_default_name_uses_category():
    assert replace_active_asset("desktop", _clip()).name == "desktop Video"


@pytest.mark.django_db
def test_invalid_category_rejected_before_any_write():
    with pytest.raises(ValidationError):
        replace_active_asset("tablet", _clip())
    assert HeroVideo.objects.count() == 0


@pytest.mark.django_db
def test_missing_file_rejected():
    with pytest.raises(ValidationError):
        replace_active_asset("desktop", None)


@pytest.mark.django_db
def test_activating_inactive_video_deactivates_sibling():
    old = replace_active_asset("mobile", _clip())
    new = replace_active_asset("mobile", _clip())

    toggled = toggle_asset_active(old.pk)

    assert toggled.is_active is True
    new.refresh_from_db()
    assert new.is_active is False
    assert _counts("mobile") == (1, 1)


@pytest.mark.django_db
def test_deactivating_active_video_leaves_none():
    video = replace_active_asset("mobile", _clip())
    replace_active_asset("mobile", _clip())
    video.refresh_from_db()

    current = HeroVideo.objects.active().get(category="mobile")
    toggle_asset_active(current.pk)

    assert _counts("mobile") == (0, 2)


@pytest.mark.django_db
def test_setting_inactive_video_inactive_is_noop():
    old = replace_active_asset("desktop", _clip())
    live = replace_active_asset("desktop", _clip())

    result = toggle_asset_active(old.pk, is_active=False)

    assert result.is_active is False
    live.refresh_from_db()
    assert live.is_active is True


@pytest.mark.django_db
def test_toggle_unknown_video():
    with pytest.raises(HeroVideo.DoesNotExist):
        toggle_asset_active(999)


@pytest.mark.django_db
def test_delete_removes_record_and_file():
    video = replace_active_asset("desktop", _clip())
    storage = video.file.storage
    name = video.file.name
    assert storage.exists(name)

    delete_asset(video.pk)

    assert not HeroVideo.objects.filter(pk=video.pk).exists()
    assert not storage.exists(name)


@pytest.mark.django_db
def test_delete_survives_file_storage_failure(monkeypatch, caplog):
    video = replace_active_asset("desktop", _clip())

    def broken_delete(self, name):
        raise OSError("bucket unavailable")

    monkeypatch.setattr(InMemoryStorage, "delete", broken_delete)
    with caplog.at_level(logging.WARNING):
        delete_asset(video.pk)

    assert not HeroVideo.objects.filter(pk=video.pk).exists()
    assert "bucket unavailable" in caplog.text


@pytest.mark.django_db
def test_activation_race_is_retried():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise IntegrityError("duplicate key value violates unique constraint")
        return "ok"

    assert services._with_activation_retry(flaky, "testing") == "ok"
    assert len(attempts) == 2


@pytest.mark.django_db
def test_activation_race_gives_up_after_max_attempts():
    def always_conflicts():
        raise IntegrityError("conflict")

    with pytest.raises(IntegrityError):
        services._with_activation_retry(always_conflicts, "testing")


@pytest.mark.django_db
def test_current_sources_fall_back_to_defaults():
    assert current_sources() == {
        "desktop": "/video/pc_video.mp4",
        "mobile": "/video/mobile_video.mp4",
    }
    video = replace_active_asset("mobile", _clip())
    sources = current_sources()
    assert sources["mobile"] == video.file.url
    assert sources["desktop"] == "/video/pc_video.mp4"


@pytest.mark.django_db
def test_second_active_row_in_a_category_is_rejected():
    HeroVideo.objects.create(name="one", category="desktop", file="hero-videos/desktop/one.mp4")
    HeroVideo.objects.create(name="mobile", category="mobile", file="hero-videos/mobile/m.mp4")
    HeroVideo.objects.create(
        name="old", category="desktop", file="hero-videos/desktop/old.mp4", is_active=False
    )

    with pytest.raises(IntegrityError), transaction.atomic():
        HeroVideo.objects.create(name="two", category="desktop", file="hero-videos/desktop/two.mp4")

    assert _counts("desktop") == (1, 1)


@pytest.mark.django_db
def test_upload_that_loses_an_activation_race_is_retried(monkeypatch):
    # a rival upload commits its active row after our deactivation ran
    rival = HeroVideo.objects.create(name="rival", category="desktop", file="hero-videos/desktop/rival.mp4")
    real_deactivate = HeroVideoQuerySet.deactivate_category
    calls = []

    def stale_deactivate(self, category, exclude_pk=None):
        calls.append(category)
        if len(calls) == 1:
            return 0
        return real_deactivate(self, category, exclude_pk=exclude_pk)

    monkeypatch.setattr(HeroVideoQuerySet, "deactivate_category", stale_deactivate)

    video = replace_active_asset("desktop", _clip("mine.mp4"))

    assert calls == ["desktop", "desktop"]
    rival.refresh_from_db()
    assert rival.is_active is False
    assert HeroVideo.objects.active().get(category="desktop") == video
    assert _counts("desktop") == (1, 1)


@pytest.mark.django_db
def test_current_sources_fall_back_when_storage_url_fails(monkeypatch, caplog):
    replace_active_asset("desktop", _clip())

    def broken_url(self, name):
        raise RuntimeError("could not sign url")

    monkeypatch.setattr(InMemoryStorage, "url", broken_url)
    with caplog.at_level(logging.WARNING):
        sources = current_sources()

    assert sources == {
        "desktop": "/video/pc_video.mp4",
        "mobile": "/video/mobile_video.mp4",
    }
    assert "could not sign url" in caplog.text
