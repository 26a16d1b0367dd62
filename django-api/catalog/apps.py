"""
Catalog App Configuration
=========================
Persistence and lifecycle management for the admin-managed catalog:
events with their editions, and papers.

This app:
- Stores each collection as one serialized document
- Enforces edition ownership and cascade deletion
- Allocates identifiers
- Reports a status line for every admin mutation
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Conference Catalog"

    def ready(self) -> None:
        from catalog import signals  # noqa: F401
