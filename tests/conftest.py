import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.posts import PostStore

from .fixtures import FixedClock


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(clock):
    """Fresh store loaded with the fixture feed"""
    return PostStore.seeded(clock=clock)


@pytest.fixture
def empty_store(clock):
    return PostStore(clock=clock)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
