from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

import structlog
from sqlalchemy import not_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from careerfair.api.schemas.fairs import FairCreate, FairUpdate
from careerfair.auth.caller import Caller
from careerfair.core.config import settings
from careerfair.models import Fair, FairEnrollment
from careerfair.models.base import ensure_utc, utcnow
from careerfair.models.fair_enrollment import EnrollmentMethod
from careerfair.services import booths_service, enrollment_ledger, jobs_service
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import (
    ConflictError,
    ExhaustedError,
    InvalidInviteCodeError,
    NotFoundError,
    ValidationError,
)
from careerfair.services.fair_store import get_fair, get_fairs_by_ids, reload_fair
from careerfair.services.invite_codes import generate_invite_code, validate_invite_code
from careerfair.services.permissions import (
    get_company,
    require_admin,
    require_admin_or_company_member,
    require_company_member,
)
from careerfair.services.transactions import commit_or_raise, rollback_on_error

logger = structlog.get_logger()


@dataclass(frozen=True)
class AdminEnrollment:
    company_id: uuid.UUID


@dataclass(frozen=True)
class InviteEnrollment:
    company_id: uuid.UUID
    code: str


EnrollmentRequest = AdminEnrollment | InviteEnrollment


def _clean_name(value: str | None) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError(ErrorCode.NAME_REQUIRED.value, "fair name is required")
    return name


def _clean_description(value: str | None) -> str | None:
    return (value or "").strip() or None


def _validate_schedule(start_time: datetime | None, end_time: datetime | None) -> None:
    start_time = ensure_utc(start_time)
    end_time = ensure_utc(end_time)
    if start_time and end_time and start_time > end_time:
        raise ValidationError(
            ErrorCode.INVALID_SCHEDULE.value, "startTime must not be after endTime"
        )


def create_fair(db: Session, caller: Caller, payload: FairCreate) -> Fair:
    require_admin(caller)

    name = _clean_name(payload.name)
    _validate_schedule(payload.start_time, payload.end_time)

    attempts = settings.invite_code_max_attempts
    for _ in range(attempts):
        fair = Fair(
            name=name,
            description=_clean_description(payload.description),
            start_time=payload.start_time,
            end_time=payload.end_time,
            is_live=False,
            invite_code=generate_invite_code(db),
            created_by=caller.user_id,
            updated_by=caller.user_id,
        )
        db.add(fair)
        try:
            commit_or_raise(db)
        except IntegrityError:
            # Lost the race for the code between the check and the insert.
            logger.warning("invite_code_collision", stage="create")
            continue

        db.refresh(fair)
        logger.info("fair_created", fair_id=str(fair.id), created_by=caller.user_id)
        return fair

    raise ExhaustedError(
        ErrorCode.INVITE_CODE_EXHAUSTED.value,
        f"could not create fair after {attempts} invite code attempts",
    )


def update_fair(db: Session, caller: Caller, fair_id: uuid.UUID, patch: FairUpdate) -> Fair:
    require_admin(caller)
    fair = get_fair(db, fair_id, for_update=True)

    patch_data = patch.model_dump(exclude_unset=True)
    if not patch_data:
        raise ValidationError(ErrorCode.NO_CHANGES.value, "no changes provided")

    if "name" in patch_data:
        patch_data["name"] = _clean_name(patch_data["name"])
    if "description" in patch_data:
        patch_data["description"] = _clean_description(patch_data["description"])

    new_start = patch_data.get("start_time", fair.start_time)
    new_end = patch_data.get("end_time", fair.end_time)
    _validate_schedule(new_start, new_end)

    for key, value in patch_data.items():
        setattr(fair, key, value)
    fair.updated_by = caller.user_id

    db.add(fair)
    commit_or_raise(db)
    db.refresh(fair)
    logger.info("fair_updated", fair_id=str(fair.id), fields=sorted(patch_data))
    return fair


def toggle_fair_live(db: Session, caller: Caller, fair_id: uuid.UUID) -> Fair:
    """Flip ``is_live``.

    The flip happens inside a single UPDATE so concurrent toggles serialize
    in the database instead of racing on a read-modify-write.
    """
    require_admin(caller)

    with rollback_on_error(db):
        result = db.execute(
            update(Fair)
            .where(Fair.id == fair_id)
            .values(is_live=not_(Fair.is_live), updated_at=utcnow(), updated_by=caller.user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError(ErrorCode.FAIR_NOT_FOUND.value, "fair not found")
        commit_or_raise(db)

    fair = reload_fair(db, fair_id)
    logger.info(
        "fair_live_toggled", fair_id=str(fair.id), is_live=fair.is_live, by=caller.user_id
    )
    return fair


def rotate_invite_code(db: Session, caller: Caller, fair_id: uuid.UUID) -> str:
    require_admin(caller)
    get_fair(db, fair_id)

    attempts = settings.invite_code_max_attempts
    for _ in range(attempts):
        code = generate_invite_code(db)
        try:
            # The unique index rejects the UPDATE itself when another
            # writer took this code after the availability check.
            with rollback_on_error(db):
                result = db.execute(
                    update(Fair)
                    .where(Fair.id == fair_id)
                    .values(invite_code=code, updated_at=utcnow(), updated_by=caller.user_id)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    raise NotFoundError(ErrorCode.FAIR_NOT_FOUND.value, "fair not found")
                commit_or_raise(db)
        except IntegrityError:
            logger.warning("invite_code_collision", fair_id=str(fair_id), stage="rotate")
            continue

        reload_fair(db, fair_id)
        logger.info("invite_code_rotated", fair_id=str(fair_id), by=caller.user_id)
        return code

    raise ExhaustedError(
        ErrorCode.INVITE_CODE_EXHAUSTED.value,
        f"could not rotate invite code after {attempts} attempts",
    )


def _authorize_enrollment(
    db: Session, caller: Caller, fair_id: uuid.UUID, request: EnrollmentRequest
) -> tuple[Fair, EnrollmentMethod]:
    if isinstance(request, AdminEnrollment):
        require_admin(caller)
        return get_fair(db, fair_id), EnrollmentMethod.ADMIN

    require_company_member(db, caller, request.company_id)
    # Unknown fair and wrong code look the same to the caller.
    if not validate_invite_code(db, fair_id, request.code):
        raise InvalidInviteCodeError(ErrorCode.INVALID_INVITE_CODE.value, "invalid invite code")
    return get_fair(db, fair_id), EnrollmentMethod.INVITE


def enroll_company(
    db: Session, caller: Caller, fair_id: uuid.UUID, request: EnrollmentRequest
) -> FairEnrollment:
    fair, method = _authorize_enrollment(db, caller, fair_id, request)
    company = get_company(db, request.company_id)

    if enrollment_ledger.get_enrollment(db, fair.id, company.id):
        raise ConflictError(
            ErrorCode.ALREADY_ENROLLED.value, "company is already enrolled in this fair"
        )

    # Booth, enrollment and job snapshot commit together or not at all.
    try:
        with rollback_on_error(db):
            booth = booths_service.stage_fair_booth(db, fair, company, caller.user_id)
            enrollment = enrollment_ledger.stage_enrollment(
                db,
                fair=fair,
                company=company,
                booth=booth,
                method=method,
                enrolled_by=caller.user_id,
            )
            jobs_copied = jobs_service.stage_company_job_snapshot(db, fair, company.id)
            commit_or_raise(db)
    except IntegrityError as exc:
        raise ConflictError(
            ErrorCode.ALREADY_ENROLLED.value, "company is already enrolled in this fair"
        ) from exc

    db.refresh(enrollment)
    logger.info(
        "company_enrolled",
        fair_id=str(fair.id),
        company_id=str(company.id),
        booth_id=str(booth.id),
        method=method.value,
        jobs_copied=jobs_copied,
        by=caller.user_id,
    )
    return enrollment


def _check_leave_policy(db: Session, fair: Fair, enrollment: FairEnrollment) -> None:
    window_hours = settings.leave_block_window_hours
    if not fair.is_live or window_hours <= 0:
        return
    since = utcnow() - timedelta(hours=window_hours)
    if booths_service.count_open_applications_since(db, enrollment.booth_id, since) > 0:
        raise ConflictError(
            ErrorCode.LEAVE_BLOCKED.value,
            f"cannot leave an active fair with open applications from the last {window_hours}h",
        )


def _unenroll(
    db: Session,
    caller: Caller,
    fair_id: uuid.UUID,
    company_id: uuid.UUID,
    *,
    enforce_leave_policy: bool,
) -> None:
    fair = get_fair(db, fair_id)
    enrollment = enrollment_ledger.get_enrollment(db, fair.id, company_id, for_update=True)
    if not enrollment:
        raise NotFoundError(
            ErrorCode.ENROLLMENT_NOT_FOUND.value, "company is not enrolled in this fair"
        )

    with rollback_on_error(db):
        if enforce_leave_policy:
            _check_leave_policy(db, fair, enrollment)
        summary = enrollment_ledger.stage_removal(db, enrollment)
        if summary is None:
            raise NotFoundError(
                ErrorCode.ENROLLMENT_NOT_FOUND.value, "company is not enrolled in this fair"
            )
        commit_or_raise(db)

    logger.info(
        "company_unenrolled",
        fair_id=str(fair_id),
        company_id=str(company_id),
        booth_id=str(summary.booth_id),
        jobs_removed=summary.jobs_removed,
        applications_removed=summary.applications_removed,
        by=caller.user_id,
    )


def remove_company(
    db: Session, caller: Caller, fair_id: uuid.UUID, company_id: uuid.UUID
) -> None:
    require_admin(caller)
    _unenroll(db, caller, fair_id, company_id, enforce_leave_policy=False)


def leave_fair(db: Session, caller: Caller, fair_id: uuid.UUID, company_id: uuid.UUID) -> None:
    require_company_member(db, caller, company_id)
    _unenroll(db, caller, fair_id, company_id, enforce_leave_policy=True)


def list_enrollments(db: Session, caller: Caller, fair_id: uuid.UUID) -> list[FairEnrollment]:
    require_admin(caller)
    fair = get_fair(db, fair_id)
    return enrollment_ledger.list_enrollments(db, fair.id)


def list_company_fairs(
    db: Session, caller: Caller, company_id: uuid.UUID
) -> list[tuple[Fair, FairEnrollment]]:
    require_admin_or_company_member(db, caller, company_id)
    return _with_fairs(db, enrollment_ledger.list_company_enrollments(db, company_id))


def list_my_enrollments(db: Session, caller: Caller) -> list[FairEnrollment]:
    if caller.company_id is None:
        return []
    return enrollment_ledger.list_company_enrollments(db, caller.company_id)


def _with_fairs(
    db: Session, enrollments: list[FairEnrollment]
) -> list[tuple[Fair, FairEnrollment]]:
    fairs = get_fairs_by_ids(db, [e.fair_id for e in enrollments])
    return [(fairs[e.fair_id], e) for e in enrollments if e.fair_id in fairs]
