"""Who may see a fair's booths and jobs.

Every booth/job list or detail endpoint goes through
``can_view_fair_content`` so the rules live in one place. Rows are checked
top to bottom and the first match wins:

    administrator                       -> allow
    company member, own company         -> allow
    company member, other, not live     -> deny FAIR_NOT_LIVE
    company member, other, live         -> allow
    student, live                       -> allow
    student, not live                   -> deny FAIR_NOT_LIVE
    unauthenticated                     -> deny UNAUTHENTICATED
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass

from careerfair.auth.caller import Caller, Role
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import AuthorizationError, UnauthenticatedError


class DenyReason(str, enum.Enum):
    FAIR_NOT_LIVE = ErrorCode.FAIR_NOT_LIVE.value
    UNAUTHENTICATED = ErrorCode.UNAUTHENTICATED.value


@dataclass(frozen=True)
class VisibilityDecision:
    allowed: bool
    reason: DenyReason | None = None


ALLOW = VisibilityDecision(allowed=True)


def _deny(reason: DenyReason) -> VisibilityDecision:
    return VisibilityDecision(allowed=False, reason=reason)


def can_view_fair_content(
    is_live: bool,
    requester: Caller | None,
    target_company_id: uuid.UUID | None = None,
) -> VisibilityDecision:
    if requester is None:
        return _deny(DenyReason.UNAUTHENTICATED)

    if requester.role == Role.ADMINISTRATOR:
        return ALLOW

    if requester.is_company_member:
        owns_target = (
            target_company_id is not None
            and requester.company_id is not None
            and requester.company_id == target_company_id
        )
        if owns_target or is_live:
            return ALLOW
        return _deny(DenyReason.FAIR_NOT_LIVE)

    if requester.role == Role.STUDENT and is_live:
        return ALLOW

    return _deny(DenyReason.FAIR_NOT_LIVE)


def require_fair_content_access(
    is_live: bool,
    requester: Caller | None,
    target_company_id: uuid.UUID | None = None,
) -> None:
    decision = can_view_fair_content(is_live, requester, target_company_id)
    if decision.allowed:
        return
    if decision.reason == DenyReason.UNAUTHENTICATED:
        raise UnauthenticatedError(ErrorCode.UNAUTHENTICATED.value, "authentication required")
    raise AuthorizationError(ErrorCode.FAIR_NOT_LIVE.value, "fair is not currently live")
