"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class StoredCollection(models.Model):
    """One serialized catalog collection, keyed by name."""

    name = models.CharField(max_length=64, unique=True)
    payload = models.BinaryField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def size(self) -> int:
        return len(self.payload or b"")
