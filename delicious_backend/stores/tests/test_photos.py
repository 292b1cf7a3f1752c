# stores/tests/test_photos.py

import io
import shutil
import tempfile

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from PIL import Image

from stores.services.exceptions import PhotoTypeError
from stores.services.photos import PHOTO_WIDTH, resize_to_width, save_photo
from stores.tests.factories import image_upload

MEDIA_ROOT = tempfile.mkdtemp()


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class StorePhotoTests(TestCase):
    """
    GUARANTEES:
    - Non-images are rejected before anything is written
    - Stored photos are 800px wide with the aspect ratio kept
    - Files are named {uuid}.{ext} under uploads/
    """

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def test_resize_keeps_ratio(self):
        buffer = io.BytesIO()
        Image.new("RGB", (1600, 900)).save(buffer, format="PNG")

        data = resize_to_width(buffer.getvalue())

        with Image.open(io.BytesIO(data)) as img:
            self.assertEqual(img.size, (PHOTO_WIDTH, 450))

    def test_save_photo_writes_resized_file(self):
        filename = save_photo(image_upload())

        self.assertTrue(filename.endswith(".png"))
        path = f"uploads/{filename}"
        self.assertTrue(default_storage.exists(path))
        with default_storage.open(path) as fh, Image.open(fh) as img:
            self.assertEqual(img.width, PHOTO_WIDTH)

    def test_jpeg_upload(self):
        upload = image_upload("photo.jpg", fmt="JPEG", content_type="image/jpeg")

        filename = save_photo(upload)

        self.assertTrue(filename.endswith(".jpeg"))

    def test_non_image_rejected(self):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")

        with self.assertRaisesMessage(PhotoTypeError, "That filetype isn't allowed!"):
            save_photo(upload)

    def test_undecodable_image_rejected(self):
        upload = SimpleUploadedFile("fake.png", b"not a png", content_type="image/png")

        with self.assertRaises(PhotoTypeError):
            save_photo(upload)
