"""Shared fixtures: isolated engine state per test."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from kudos_gateway.app import create_app
from kudos_gateway.app_state import GatewayState
from kudos_gateway.demo import DEMO_CALLERS
from kudos_gateway.models.recognition import Recognition, Visibility
from kudos_gateway.services.directory import StaticDirectory

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_recognition(id: str, recipient_id: str, visibility: Visibility, sender_id: str = "3") -> Recognition:
    return Recognition(
        id=id,
        senderId=sender_id,
        recipientId=recipient_id,
        message=f"message {id}",
        emoji=":)",
        visibility=visibility,
        createdAt=T0,
    )


@pytest.fixture
def state():
    """Fresh engine with the demo directory and an empty store."""
    return GatewayState(StaticDirectory(DEMO_CALLERS))


@pytest.fixture
def service(state):
    return state.service


@pytest.fixture
def seeded(state):
    """Store seeded with a PUBLIC recognition for 2 and a PRIVATE one for 1."""
    state.service.seed([
        make_recognition("101", "2", Visibility.PUBLIC),
        make_recognition("102", "1", Visibility.PRIVATE),
    ])
    return state


@pytest.fixture
def client(state):
    with TestClient(create_app(state)) as c:
        yield c
