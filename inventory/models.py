# inventory/models.py
import uuid
from django.db import models


class Stock(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item = models.CharField(max_length=255, unique=True)
    expected_count = models.IntegerField(default=0)
    # Only the counting flow writes this, and only upwards.
    detected_count = models.IntegerField(default=0)

    def __str__(self):
        return f"{self.item} ({self.detected_count}/{self.expected_count})"
