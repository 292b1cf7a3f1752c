# stores/services/photos.py

"""
STORE PHOTO UPLOADS

Rules:
- only uploads whose content type starts with "image/" are accepted;
  anything else raises PhotoTypeError
- accepted images are resized to 800px wide, height scaled to keep the ratio
- saved as uploads/{uuid4}.{ext} in the default storage, where ext is the
  subtype of the upload's content type (image/png -> png)
"""

from __future__ import annotations

import io
import logging
import uuid

from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from PIL import Image

from stores.services.exceptions import PhotoTypeError

logger = logging.getLogger(__name__)

PHOTO_WIDTH = 800
UPLOAD_DIR = "uploads"

# Pillow format names for content-type subtypes that differ from them.
_PIL_FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "pjpeg": "JPEG",
    "svg+xml": None,
}


def ensure_image(upload) -> str:
    """Return the upload's extension, or raise PhotoTypeError for non-images."""
    content_type = (getattr(upload, "content_type", "") or "").lower()
    if not content_type.startswith("image/"):
        logger.info("Rejected photo upload", extra={"content_type": content_type})
        raise PhotoTypeError("That filetype isn't allowed!")
    return content_type.split("/", 1)[1]


def resize_to_width(image_bytes: bytes, *, width: int = PHOTO_WIDTH, fmt: str | None = None) -> bytes:
    with Image.open(io.BytesIO(image_bytes)) as img:
        fmt = fmt or img.format or "PNG"
        height = max(1, round(img.height * width / img.width))
        resized = img.resize((width, height))
        if fmt == "JPEG" and resized.mode not in ("RGB", "L"):
            resized = resized.convert("RGB")
        output = io.BytesIO()
        resized.save(output, format=fmt)
        return output.getvalue()


def save_photo(upload) -> str:
    """
    Validate, resize and store an uploaded photo.

    Returns the stored filename ({uuid}.{ext}) to keep on Store.photo.
    """
    ext = ensure_image(upload)
    filename = f"{uuid.uuid4()}.{ext}"

    fmt = _PIL_FORMATS.get(ext, ext.upper())
    if fmt is None:
        raise PhotoTypeError("That filetype isn't allowed!")

    upload.seek(0)
    try:
        data = resize_to_width(upload.read(), fmt=fmt)
    except (OSError, ValueError, KeyError) as exc:
        # Pillow could not decode or encode it; treat like a bad file type.
        logger.info("Unreadable photo upload", extra={"photo_name": filename})
        raise PhotoTypeError("That filetype isn't allowed!") from exc

    default_storage.save(f"{UPLOAD_DIR}/{filename}", ContentFile(data))

    logger.info("Photo stored", extra={"photo_name": filename})
    return filename
