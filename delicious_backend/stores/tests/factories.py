# stores/tests/factories.py

import io

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from stores.services.store_service import create_store

User = get_user_model()

HAMILTON = (-79.8711, 43.2557)


def make_user(email="owner@example.com", password="s3cret-pass!", **extra):
    extra.setdefault("name", email.split("@")[0].title())
    return User.objects.create_user(email=email, password=password, **extra)


def make_store(author, name="Cafe Retro", *, tags=None, lng=HAMILTON[0], lat=HAMILTON[1], **fields):
    fields.setdefault("address", "Hamilton, ON")
    fields.setdefault("description", "")
    return create_store(
        author=author,
        tag_names=tags,
        name=name,
        longitude=lng,
        latitude=lat,
        **fields,
    )


def image_upload(name="photo.png", *, size=(1600, 900), fmt="PNG", content_type="image/png"):
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 40, 40)).save(buffer, format=fmt)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
