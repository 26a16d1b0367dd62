"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from catalog.domain.value_objects import IdGenerator
from catalog.services import EventAggregateManager, PaperRepository
from catalog.stores import InMemoryBlobStore


class FakeClock:
    """Clock frozen at a given instant, advanced by hand."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now += seconds


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_client(django_user_model) -> APIClient:
    user = django_user_model.objects.create_user(
        username="staff", password="secret", is_staff=True
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids(clock: FakeClock) -> IdGenerator:
    return IdGenerator(clock=clock)


@pytest.fixture
def store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def events(store: InMemoryBlobStore, ids: IdGenerator) -> EventAggregateManager:
    return EventAggregateManager(store, ids=ids)


@pytest.fixture
def papers(store: InMemoryBlobStore, ids: IdGenerator) -> PaperRepository:
    return PaperRepository(store, ids=ids)
