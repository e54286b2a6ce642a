"""
Blob storage helpers shared by the blog image and hero video flows.

Uploads go through Django's configured default storage (S3, GCS or local
filesystem, see settings).  Deletion is best effort: a failure is logged
and reported to the caller, never raised, so record removal can proceed.
"""
import logging
import os
import uuid

from django.core.files.storage import default_storage
from django.utils.text import slugify

logger = logging.getLogger(__name__)


def unique_blob_name(folder: str, filename: str) -> str:
    """``<folder>/<slug>-<8 hex><ext>`` so uploads never overwrite each other."""
    name, ext = os.path.splitext(filename or "")
    base = slugify(name) or "upload"
    return f"{folder}/{base}-{uuid.uuid4().hex[:8]}{ext.lower()}"


def delete_blob(name: str, storage=None) -> bool:
    """
    Remove ``name`` from blob storage.

    Returns True when the blob is gone (or there was nothing to delete) and
    False when the storage backend raised; the error is logged as a warning.
    """
    if not name:
        return True
    storage = storage or default_storage
    try:
        storage.delete(name)
    except Exception as exc:
        logger.warning("Blob deletion failed for %s: %s", name, exc)
        return False
    return True
