from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from catalog.stores.interfaces import BlobStore
from catalog.stores.memory_store import InMemoryBlobStore

__all__ = ["BlobStore", "InMemoryBlobStore", "store_from_settings"]


def store_from_settings() -> BlobStore:
    """Build the store selected by ``CATALOG["STORE"]``."""
    options = getattr(settings, "CATALOG", {})
    backend = options.get("STORE", "database")
    if backend == "memory":
        return InMemoryBlobStore()
    if backend == "database":
        from catalog.stores.django_store import DjangoBlobStore

        return DjangoBlobStore(cache_timeout=options.get("CACHE_TIMEOUT", 300))
    raise ImproperlyConfigured(f"Unknown CATALOG store backend: {backend!r}")
