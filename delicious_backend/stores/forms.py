# stores/forms.py

"""
STORE FORM

- Model fields: name, description, address, longitude, latitude
- tags: comma separated free text (kept as a set of Tag rows)
- photo: optional upload; non-images fail on this field only
"""

from __future__ import annotations

from django import forms
from django.core.validators import MaxValueValidator, MinValueValidator

from stores.models import Store
from stores.services.exceptions import PhotoTypeError
from stores.services.photos import ensure_image
from stores.services.store_service import parse_tag_names


class StoreForm(forms.ModelForm):
    tags = forms.CharField(
        required=False,
        help_text="Comma separated, e.g. Wifi, Open Late",
    )
    photo = forms.FileField(required=False)

    longitude = forms.FloatField(
        validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)],
        error_messages={"required": "You must supply coordinates!"},
    )
    latitude = forms.FloatField(
        validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)],
        error_messages={"required": "You must supply coordinates!"},
    )

    class Meta:
        model = Store
        fields = ["name", "description", "address", "longitude", "latitude"]
        error_messages = {
            "name": {"required": "Please enter a store name!"},
            "address": {"required": "You must supply an address!"},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.instance._state.adding and not self.is_bound:
            self.initial["tags"] = ", ".join(
                self.instance.tags.values_list("name", flat=True)
            )

    def clean_tags(self):
        return parse_tag_names(self.cleaned_data.get("tags"))

    def clean_photo(self):
        upload = self.cleaned_data.get("photo")
        if not upload:
            return None
        try:
            ensure_image(upload)
        except PhotoTypeError as exc:
            raise forms.ValidationError(str(exc), code="invalid_filetype") from exc
        return upload
