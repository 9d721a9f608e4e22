"""Caller and recognition models matching the client-side types."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    HR = "HR"
    LEAD = "LEAD"


class Visibility(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    ANONYMOUS = "ANONYMOUS"


# Roles allowed to read every recognition in general listings
ELEVATED_ROLES = frozenset({Role.HR, Role.MANAGER})


class Caller(BaseModel):
    id: str
    name: str = ""
    role: Role
    team: str

    model_config = {"frozen": True}


class Recognition(BaseModel):
    id: str
    senderId: str
    recipientId: str
    message: str
    emoji: str
    visibility: Visibility
    createdAt: datetime

    model_config = {"frozen": True}


class RecognitionSubmission(BaseModel):
    senderId: str
    recipientId: str
    message: str
    emoji: str
    # Validated by the service so an unknown value surfaces as InvalidVisibility
    visibility: str


class RecognitionView(Recognition):
    """Recognition with its sender and recipient resolved from the directory."""

    sender: Caller | None = None
    recipient: Caller | None = None
