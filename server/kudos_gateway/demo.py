"""Demo directory and seed recognitions for local runs."""

from __future__ import annotations

from datetime import datetime, timezone

from .models.recognition import Caller, Recognition, Role, Visibility

DEMO_CALLERS = [
    Caller(id="1", name="Alice", role=Role.EMPLOYEE, team="Engineering"),
    Caller(id="2", name="Bob", role=Role.MANAGER, team="Engineering"),
    Caller(id="3", name="Charlie", role=Role.HR, team="People"),
    Caller(id="4", name="Dana", role=Role.EMPLOYEE, team="Marketing"),
]


def demo_recognitions() -> list[Recognition]:
    now = datetime.now(timezone.utc)
    return [
        Recognition(
            id="101",
            senderId="1",
            recipientId="2",
            message="Thanks for the support on the sprint!",
            emoji="👏",
            visibility=Visibility.PUBLIC,
            createdAt=now,
        ),
        Recognition(
            id="102",
            senderId="2",
            recipientId="1",
            message="Great job fixing that critical bug.",
            emoji="🐛",
            visibility=Visibility.PRIVATE,
            createdAt=now,
        ),
    ]
