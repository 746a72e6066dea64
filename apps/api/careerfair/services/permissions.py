from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from careerfair.auth.caller import Caller
from careerfair.models import Company
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import AuthorizationError, NotFoundError


def require_admin(caller: Caller) -> None:
    if not caller.is_admin:
        raise AuthorizationError(ErrorCode.ADMIN_REQUIRED.value, "administrator role required")


def get_company(db: Session, company_id: uuid.UUID) -> Company:
    company = db.get(Company, company_id)
    if not company:
        raise NotFoundError(ErrorCode.COMPANY_NOT_FOUND.value, "company not found")
    return company


def require_company_member(db: Session, caller: Caller, company_id: uuid.UUID) -> Company:
    """Caller must be the company's owner or one of its representatives."""
    if not caller.is_company_member:
        raise AuthorizationError(
            ErrorCode.NOT_COMPANY_MEMBER.value,
            "must be an owner or representative of this company",
        )
    company = get_company(db, company_id)
    if not company.has_member(caller.user_id):
        raise AuthorizationError(
            ErrorCode.NOT_COMPANY_MEMBER.value,
            "must be an owner or representative of this company",
        )
    return company


def require_admin_or_company_member(
    db: Session, caller: Caller, company_id: uuid.UUID
) -> Company | None:
    if caller.is_admin:
        return None
    return require_company_member(db, caller, company_id)
