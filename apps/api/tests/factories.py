"""Factory helpers for fair tests.

Companies and their standing jobs are owned by another service in
production, so tests write them straight into the database.
"""

from __future__ import annotations

import secrets
import uuid

from sqlalchemy.orm import Session

from careerfair.auth.caller import Caller, Role
from careerfair.auth.jwt import create_access_token
from careerfair.models import Company, CompanyJob

ADMIN = Caller(user_id="admin-1", role=Role.ADMINISTRATOR)
STUDENT = Caller(user_id="student-1", role=Role.STUDENT)


def auth_headers(caller: Caller) -> dict[str, str]:
    token = create_access_token(caller.user_id, caller.role, caller.company_id)
    return {"Authorization": f"Bearer {token}"}


def create_company(
    db: Session,
    name: str = "Acme",
    owner_id: str | None = None,
    representative_ids: list[str] | None = None,
    job_names: tuple[str, ...] = (),
    **overrides,
) -> Company:
    company = Company(
        company_name=name,
        owner_id=owner_id or f"owner-{secrets.token_hex(4)}",
        representative_ids=representative_ids or [],
        industry=overrides.pop("industry", "Software"),
        description=overrides.pop("description", f"{name} builds things"),
        **overrides,
    )
    db.add(company)
    db.flush()
    for job_name in job_names:
        db.add(CompanyJob(company_id=company.id, name=job_name, description=f"{job_name} role"))
    db.commit()
    db.refresh(company)
    return company


def owner_of(company: Company) -> Caller:
    return Caller(user_id=company.owner_id, role=Role.COMPANY_OWNER, company_id=company.id)


def representative_of(company: Company, user_id: str) -> Caller:
    return Caller(user_id=user_id, role=Role.REPRESENTATIVE, company_id=company.id)


def outsider(company_id: uuid.UUID | None = None) -> Caller:
    return Caller(user_id="stranger", role=Role.COMPANY_OWNER, company_id=company_id)
