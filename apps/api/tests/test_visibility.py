from __future__ import annotations

import uuid

import pytest

from careerfair.auth.caller import Caller, Role
from careerfair.services.exceptions import AuthorizationError, UnauthenticatedError
from careerfair.services.visibility import (
    DenyReason,
    can_view_fair_content,
    require_fair_content_access,
)

OWN_COMPANY = uuid.uuid4()
OTHER_COMPANY = uuid.uuid4()


def _caller(role: Role, company_id: uuid.UUID | None = None) -> Caller:
    return Caller(user_id=f"{role.value}-user", role=role, company_id=company_id)


@pytest.mark.parametrize("is_live", [True, False])
@pytest.mark.parametrize("target", [None, OWN_COMPANY, OTHER_COMPANY])
def test_administrator_always_allowed(is_live, target):
    decision = can_view_fair_content(is_live, _caller(Role.ADMINISTRATOR), target)
    assert decision.allowed
    assert decision.reason is None


@pytest.mark.parametrize("role", [Role.COMPANY_OWNER, Role.REPRESENTATIVE])
@pytest.mark.parametrize("is_live", [True, False])
def test_company_member_sees_own_company(role, is_live):
    decision = can_view_fair_content(is_live, _caller(role, OWN_COMPANY), OWN_COMPANY)
    assert decision.allowed


@pytest.mark.parametrize("role", [Role.COMPANY_OWNER, Role.REPRESENTATIVE])
@pytest.mark.parametrize("target", [None, OTHER_COMPANY])
def test_company_member_blocked_from_others_when_offline(role, target):
    decision = can_view_fair_content(False, _caller(role, OWN_COMPANY), target)
    assert not decision.allowed
    assert decision.reason == DenyReason.FAIR_NOT_LIVE


@pytest.mark.parametrize("role", [Role.COMPANY_OWNER, Role.REPRESENTATIVE])
@pytest.mark.parametrize("target", [None, OTHER_COMPANY])
def test_company_member_sees_others_when_live(role, target):
    assert can_view_fair_content(True, _caller(role, OWN_COMPANY), target).allowed


def test_company_member_without_company_claim_is_not_owner():
    decision = can_view_fair_content(False, _caller(Role.COMPANY_OWNER), OTHER_COMPANY)
    assert decision.reason == DenyReason.FAIR_NOT_LIVE


@pytest.mark.parametrize("target", [None, OTHER_COMPANY])
def test_student_follows_live_flag(target):
    student = _caller(Role.STUDENT)
    assert can_view_fair_content(True, student, target).allowed

    offline = can_view_fair_content(False, student, target)
    assert not offline.allowed
    assert offline.reason == DenyReason.FAIR_NOT_LIVE


@pytest.mark.parametrize("is_live", [True, False])
def test_unauthenticated_denied(is_live):
    decision = can_view_fair_content(is_live, None, OTHER_COMPANY)
    assert not decision.allowed
    assert decision.reason == DenyReason.UNAUTHENTICATED


def test_require_access_maps_reasons_to_errors():
    with pytest.raises(UnauthenticatedError):
        require_fair_content_access(True, None)

    with pytest.raises(AuthorizationError) as exc_info:
        require_fair_content_access(False, _caller(Role.STUDENT))
    assert exc_info.value.code == "FAIR_NOT_LIVE"
    assert not isinstance(exc_info.value, UnauthenticatedError)

    require_fair_content_access(True, _caller(Role.STUDENT))
