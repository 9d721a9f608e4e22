"""Errors raised by the recognition engine."""

from __future__ import annotations


class RecognitionError(Exception):
    """Base class for recognition engine failures."""


class UnknownCaller(RecognitionError):
    """The directory has no caller with the supplied identifier."""

    def __init__(self, caller_id: str) -> None:
        super().__init__(f"Unknown caller: {caller_id}")
        self.caller_id = caller_id


class InvalidVisibility(RecognitionError):
    """A visibility value outside PUBLIC, PRIVATE, ANONYMOUS was supplied."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid visibility: {value!r}")
        self.value = value
