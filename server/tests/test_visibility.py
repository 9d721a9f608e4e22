"""Tests for the visibility rules."""

import pytest

from kudos_gateway.models.recognition import Caller, Role, Visibility
from kudos_gateway.services.visibility import addressed_to, can_view, can_view_own, visible_to

from conftest import make_recognition


def caller(role: Role, id: str = "9") -> Caller:
    return Caller(id=id, name="Test", role=role, team="QA")


@pytest.mark.parametrize("role", list(Role))
def test_public_visible_to_every_role(role):
    rec = make_recognition("1", "2", Visibility.PUBLIC)
    assert can_view(caller(role), rec)


@pytest.mark.parametrize("visibility", [Visibility.PRIVATE, Visibility.ANONYMOUS])
@pytest.mark.parametrize("role", list(Role))
def test_restricted_visible_only_to_elevated_roles(role, visibility):
    rec = make_recognition("1", "2", visibility)
    assert can_view(caller(role), rec) == (role in (Role.HR, Role.MANAGER))


@pytest.mark.parametrize("visibility", list(Visibility))
def test_recipient_sees_own_regardless_of_visibility(visibility):
    viewer = caller(Role.EMPLOYEE, id="5")
    assert can_view_own(viewer, make_recognition("1", "5", visibility))


def test_own_rule_excludes_other_recipients():
    viewer = caller(Role.HR, id="5")
    assert not can_view_own(viewer, make_recognition("1", "6", Visibility.PUBLIC))


def test_rules_are_deterministic():
    viewer = caller(Role.LEAD)
    recs = [make_recognition(str(i), "9", v) for i, v in enumerate(Visibility)]
    first = visible_to(viewer, recs)
    assert visible_to(viewer, recs) == first
    assert [r.id for r in first] == ["0"]
    assert addressed_to(viewer, recs) == recs
