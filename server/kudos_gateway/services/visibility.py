"""Visibility rules deciding which recognitions a viewer may read.

Both rules are pure functions of (viewer, recognition) so listings are
deterministic for a given store snapshot.
"""

from __future__ import annotations

from typing import Iterable

from ..models.recognition import ELEVATED_ROLES, Caller, Recognition, Visibility

# Visibilities a recipient may see on their own recognitions. This is the
# whole enumeration: recipients always see what was addressed to them.
OWN_VISIBLE = frozenset({Visibility.PUBLIC, Visibility.PRIVATE, Visibility.ANONYMOUS})


def can_view(viewer: Caller, recognition: Recognition) -> bool:
    """General listing rule: elevated roles see all, others only PUBLIC."""
    if viewer.role in ELEVATED_ROLES:
        return True
    return recognition.visibility == Visibility.PUBLIC


def can_view_own(viewer: Caller, recognition: Recognition) -> bool:
    """The "mine" listing rule: recognitions addressed to the viewer."""
    return recognition.recipientId == viewer.id and recognition.visibility in OWN_VISIBLE


def visible_to(viewer: Caller, recognitions: Iterable[Recognition]) -> list[Recognition]:
    return [r for r in recognitions if can_view(viewer, r)]


def addressed_to(viewer: Caller, recognitions: Iterable[Recognition]) -> list[Recognition]:
    return [r for r in recognitions if can_view_own(viewer, r)]
