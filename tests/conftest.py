from __future__ import annotations

import pytest

from tests.fakes import FakeSession
from tyba_client.client import TybaClient


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> TybaClient:
    with TybaClient("test-token", host="https://api.example.com", session=session) as tyba:
        yield tyba
