"""
Hero video replacement.

Keeps the rule "at most one active video per category".  Uploading a new
video deactivates the current one (kept for history) and inserts the new
record as active; toggling a record on performs the same sibling
deactivation.  Both writes share one transaction, and the partial unique
constraint on ``HeroVideo`` rejects a concurrent second activation.  That
``IntegrityError`` is retried so the latest writer ends up active.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction

from common.storage import delete_blob
from .models import HeroVideo, hero_video_upload_path

logger = logging.getLogger(__name__)

MAX_ACTIVATION_ATTEMPTS = 3
DEFAULT_SOURCES = {
    HeroVideo.CATEGORY_DESKTOP: "/video/pc_video.mp4",
    HeroVideo.CATEGORY_MOBILE: "/video/mobile_video.mp4",
}
VALID_CATEGORIES = {value for value, _ in HeroVideo.CATEGORY_CHOICES}


class AssetStorageError(Exception):
    """The blob store rejected an upload."""


def validate_category(category) -> str:
    if category not in VALID_CATEGORIES:
        raise ValidationError(
            "Invalid video type. Expected one of: %(choices)s",
            code="invalid_category",
            params={"choices": ", ".join(sorted(VALID_CATEGORIES))},
        )
    return category


def _file_storage():
    return HeroVideo._meta.get_field("file").storage


def _with_activation_retry(operation, label):
    """Run ``operation`` in its own transaction, retrying lost activation races."""
    for attempt in range(1, MAX_ACTIVATION_ATTEMPTS + 1):
        try:
            with transaction.atomic():
                return operation()
        except IntegrityError:
            if attempt == MAX_ACTIVATION_ATTEMPTS:
                raise
            logger.warning("Concurrent activation while %s, retrying (%d/%d)", label, attempt, MAX_ACTIVATION_ATTEMPTS)


def replace_active_asset(category, file, name=None, original_name=None, size=None, mime_type=None) -> HeroVideo:
    """
    Store ``file`` and make it the active video of ``category``.

    The previous active video of the category, if any, stays in the table
    with ``is_active=False``.  Raises ``ValidationError`` for an unknown
    category or a missing file before anything is written, and
    ``AssetStorageError`` when the blob store refuses the upload.
    """
    validate_category(category)
    if not file:
        raise ValidationError("No video file provided", code="required")

    original_name = original_name or getattr(file, "name", "") or ""
    size = size if size is not None else (getattr(file, "size", None) or 0)
    mime_type = mime_type or getattr(file, "content_type", "") or ""
    name = (name or "").strip() or f"{category} Video"

    storage = _file_storage()
    probe = HeroVideo(category=category)
    try:
        stored_name = storage.save(hero_video_upload_path(probe, original_name or "video.mp4"), file)
    except Exception as exc:
        raise AssetStorageError(f"Failed to store video: {exc}") from exc

    def _swap():
        deactivated = HeroVideo.objects.deactivate_category(category)
        video = HeroVideo.objects.create(
            name=name,
            category=category,
            file=stored_name,
            original_name=original_name,
            size=size,
            mime_type=mime_type,
            is_active=True,
        )
        logger.info("Activated %s video %s (deactivated %d previous)", category, video.pk, deactivated)
        return video

    try:
        return _with_activation_retry(_swap, f"uploading {category} video")
    except DatabaseError:
        delete_blob(stored_name, storage)
        raise


def toggle_asset_active(asset_id, is_active=None) -> HeroVideo:
    """
    Flip (or set) ``is_active`` on one video.

    Activating deactivates the other videos of the same category.
    Deactivating the live video leaves the category with none; nothing is
    promoted in its place.  Setting an inactive video inactive changes
    nothing.  Raises ``HeroVideo.DoesNotExist`` for an unknown id.
    """

    def _toggle():
        video = HeroVideo.objects.select_for_update().get(pk=asset_id)
        target = (not video.is_active) if is_active is None else bool(is_active)
        if target:
            video.activate()
            logger.info("Activated %s video %s", video.category, video.pk)
        elif video.is_active:
            video.deactivate()
            logger.info("Deactivated %s video %s", video.category, video.pk)
        return video

    return _with_activation_retry(_toggle, f"toggling video {asset_id}")


def delete_asset(asset_id) -> None:
    """
    Remove a video record and try to remove its file.

    A failed file deletion is logged as a warning; the record is removed
    either way.  Raises ``HeroVideo.DoesNotExist`` for an unknown id.
    """
    video = HeroVideo.objects.get(pk=asset_id)
    blob_name = video.file.name
    storage = video.file.storage
    video.delete()
    logger.info("Deleted %s video %s", video.category, asset_id)
    if not delete_blob(blob_name, storage):
        logger.warning("Video %s removed but its file %s could not be deleted", asset_id, blob_name)


def current_sources() -> dict:
    """
    URLs of the live desktop and mobile videos.

    Categories with no active video, or any lookup failure, fall back to
    the bundled default files, so a broken database or blob store never
    breaks the landing page.
    """
    sources = dict(DEFAULT_SOURCES)
    try:
        for video in HeroVideo.objects.active():
            sources[video.category] = video.file.url
    except Exception as exc:
        logger.warning("Falling back to default hero videos: %s", exc)
        return dict(DEFAULT_SOURCES)
    return sources
