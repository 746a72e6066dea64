from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from careerfair.api.schemas.fairs import BoothUpdate
from careerfair.auth.caller import Caller, Role
from careerfair.models import BoothApplication, Company, Fair, FairBooth
from careerfair.models.company import BOOTH_PROFILE_FIELDS
from careerfair.models.fair_booth import BoothApplicationStatus
from careerfair.services import enrollment_ledger
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from careerfair.services.fair_store import get_fair
from careerfair.services.permissions import require_admin_or_company_member
from careerfair.services.transactions import commit_or_raise
from careerfair.services.visibility import require_fair_content_access


def stage_fair_booth(db: Session, fair: Fair, company: Company, enrolled_by: str) -> FairBooth:
    """Create the fair-scoped booth from the company's current profile."""
    booth = FairBooth(
        fair_id=fair.id,
        company_id=company.id,
        company_name=company.company_name,
        enrolled_by=enrolled_by,
        **{name: getattr(company, name) for name in BOOTH_PROFILE_FIELDS},
    )
    db.add(booth)
    db.flush()
    return booth


def _get_booth(db: Session, fair_id: uuid.UUID, booth_id: uuid.UUID) -> FairBooth | None:
    return db.scalar(
        select(FairBooth).where(FairBooth.id == booth_id, FairBooth.fair_id == fair_id)
    )


def _booth_not_found() -> NotFoundError:
    return NotFoundError(ErrorCode.BOOTH_NOT_FOUND.value, "booth not found")


def list_booths(db: Session, caller: Caller | None, fair_id: uuid.UUID) -> list[FairBooth]:
    fair = get_fair(db, fair_id)
    require_fair_content_access(fair.is_live, caller)
    return list(
        db.scalars(
            select(FairBooth)
            .where(FairBooth.fair_id == fair.id)
            .order_by(FairBooth.company_name, FairBooth.created_at)
        )
    )


def get_booth(
    db: Session, caller: Caller | None, fair_id: uuid.UUID, booth_id: uuid.UUID
) -> FairBooth:
    fair = get_fair(db, fair_id)
    booth = _get_booth(db, fair.id, booth_id)
    require_fair_content_access(fair.is_live, caller, booth.company_id if booth else None)
    if not booth:
        raise _booth_not_found()
    return booth


def update_booth(
    db: Session,
    caller: Caller,
    fair_id: uuid.UUID,
    booth_id: uuid.UUID,
    patch: BoothUpdate,
) -> FairBooth:
    booth = _get_booth(db, fair_id, booth_id)
    if not booth:
        raise _booth_not_found()

    require_admin_or_company_member(db, caller, booth.company_id)

    patch_data = patch.model_dump(exclude_unset=True)
    if "company_name" in patch_data:
        name = (patch_data["company_name"] or "").strip()
        if not name:
            raise ValidationError(ErrorCode.NAME_REQUIRED.value, "company name cannot be empty")
        patch_data["company_name"] = name

    for key, value in patch_data.items():
        setattr(booth, key, value)

    db.add(booth)
    commit_or_raise(db)
    db.refresh(booth)
    return booth


def get_company_booth(
    db: Session, caller: Caller, fair_id: uuid.UUID, company_id: uuid.UUID
) -> FairBooth:
    require_admin_or_company_member(db, caller, company_id)

    enrollment = enrollment_ledger.get_enrollment(db, fair_id, company_id)
    if not enrollment:
        raise NotFoundError(
            ErrorCode.ENROLLMENT_NOT_FOUND.value, "company is not enrolled in this fair"
        )
    booth = _get_booth(db, fair_id, enrollment.booth_id)
    if not booth:
        raise _booth_not_found()
    return booth


def apply_to_booth(
    db: Session, caller: Caller | None, fair_id: uuid.UUID, booth_id: uuid.UUID
) -> BoothApplication:
    fair = get_fair(db, fair_id)
    require_fair_content_access(fair.is_live, caller)
    if caller.role != Role.STUDENT:
        raise AuthorizationError(ErrorCode.STUDENT_REQUIRED.value, "only students can apply")

    booth = _get_booth(db, fair.id, booth_id)
    if not booth:
        raise _booth_not_found()

    application = BoothApplication(
        fair_id=fair.id,
        booth_id=booth.id,
        student_id=caller.user_id,
        status=BoothApplicationStatus.OPEN,
    )
    db.add(application)
    try:
        commit_or_raise(db)
    except IntegrityError as exc:
        raise ConflictError(
            ErrorCode.ALREADY_APPLIED.value, "already applied to this booth"
        ) from exc

    db.refresh(application)
    return application


def count_open_applications_since(db: Session, booth_id: uuid.UUID, since: datetime) -> int:
    return int(
        db.scalar(
            select(func.count())
            .select_from(BoothApplication)
            .where(
                BoothApplication.booth_id == booth_id,
                BoothApplication.status == BoothApplicationStatus.OPEN,
                BoothApplication.created_at >= since,
            )
        )
        or 0
    )
