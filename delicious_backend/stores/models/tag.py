# stores/models/tag.py

from django.db import models


class Tag(models.Model):
    """Free-text label attached to stores. Names are unique and trimmed."""

    name = models.CharField(max_length=64, unique=True)

    class Meta:
        ordering = ["name"]

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
