"""Django signals for cache invalidation and admin status notifications."""

import logging

from django.core.cache import caches
from django.db.models.signals import post_delete, post_save
from django.dispatch import Signal, receiver

from catalog.models import StoredCollection
from catalog.stores.django_store import cache_alias, cache_key

logger = logging.getLogger(__name__)

# Sent after every admin mutation with ``message`` (one line) and ``ok``.
status_reported = Signal()


def report_status(sender, message: str, ok: bool = True) -> None:
    """Fire-and-forget: receiver failures and return values are ignored."""
    for _receiver, response in status_reported.send_robust(sender=sender, message=message, ok=ok):
        if isinstance(response, Exception):
            logger.debug("Status receiver failed: %r", response)


@receiver(status_reported)
def log_status(sender, message, ok, **kwargs):
    """Record every admin status line in the application log."""
    logger.log(logging.INFO if ok else logging.WARNING, message)


@receiver([post_save, post_delete], sender=StoredCollection)
def invalidate_collection_cache(sender, instance, **kwargs):
    """Invalidate the cached blob when a stored collection is saved or deleted."""
    caches[cache_alias()].delete(cache_key(instance.name))
