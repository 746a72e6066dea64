from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from careerfair.api.schemas.fairs import JobCreate, JobUpdate
from careerfair.auth.caller import Caller
from careerfair.models import CompanyJob, Fair, FairJob
from careerfair.services import enrollment_ledger
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import NotFoundError, ValidationError
from careerfair.services.fair_store import get_fair
from careerfair.services.permissions import require_admin_or_company_member
from careerfair.services.transactions import commit_or_raise
from careerfair.services.visibility import require_fair_content_access


def stage_company_job_snapshot(db: Session, fair: Fair, company_id: uuid.UUID) -> int:
    """Copy the company's standing postings into the fair, without committing."""
    source_jobs = db.scalars(select(CompanyJob).where(CompanyJob.company_id == company_id)).all()
    for job in source_jobs:
        db.add(
            FairJob(
                fair_id=fair.id,
                company_id=company_id,
                source_job_id=job.id,
                name=job.name,
                description=job.description,
                majors_associated=job.majors_associated,
                application_link=job.application_link,
            )
        )
    db.flush()
    return len(source_jobs)


def _get_job(db: Session, fair_id: uuid.UUID, job_id: uuid.UUID) -> FairJob:
    job = db.scalar(select(FairJob).where(FairJob.id == job_id, FairJob.fair_id == fair_id))
    if not job:
        raise NotFoundError(ErrorCode.JOB_NOT_FOUND.value, "job not found")
    return job


def _clean_name(value: str | None) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError(ErrorCode.NAME_REQUIRED.value, "job name is required")
    return name


def list_jobs(
    db: Session,
    caller: Caller | None,
    fair_id: uuid.UUID,
    company_id: uuid.UUID | None = None,
) -> list[FairJob]:
    fair = get_fair(db, fair_id)
    require_fair_content_access(fair.is_live, caller, company_id)

    stmt = select(FairJob).where(FairJob.fair_id == fair.id)
    if company_id is not None:
        stmt = stmt.where(FairJob.company_id == company_id)
    return list(db.scalars(stmt.order_by(FairJob.created_at, FairJob.name)))


def create_job(db: Session, caller: Caller, fair_id: uuid.UUID, payload: JobCreate) -> FairJob:
    company_id = payload.company_id or caller.company_id
    if company_id is None:
        raise ValidationError(ErrorCode.VALIDATION_ERROR.value, "companyId is required")
    name = _clean_name(payload.name)

    fair = get_fair(db, fair_id)
    require_admin_or_company_member(db, caller, company_id)

    # Jobs only exist inside a fair through an enrollment, so leaving the
    # fair can retract all of them.
    if not enrollment_ledger.get_enrollment(db, fair.id, company_id):
        raise NotFoundError(
            ErrorCode.ENROLLMENT_NOT_FOUND.value, "company is not enrolled in this fair"
        )

    job = FairJob(
        fair_id=fair.id,
        company_id=company_id,
        name=name,
        description=(payload.description or "").strip() or None,
        majors_associated=payload.majors_associated,
        application_link=payload.application_link,
    )
    db.add(job)
    commit_or_raise(db)
    db.refresh(job)
    return job


def update_job(
    db: Session, caller: Caller, fair_id: uuid.UUID, job_id: uuid.UUID, patch: JobUpdate
) -> FairJob:
    job = _get_job(db, fair_id, job_id)
    require_admin_or_company_member(db, caller, job.company_id)

    patch_data = patch.model_dump(exclude_unset=True)
    if "name" in patch_data:
        patch_data["name"] = _clean_name(patch_data["name"])

    for key, value in patch_data.items():
        setattr(job, key, value)

    db.add(job)
    commit_or_raise(db)
    db.refresh(job)
    return job


def delete_job(db: Session, caller: Caller, fair_id: uuid.UUID, job_id: uuid.UUID) -> None:
    job = _get_job(db, fair_id, job_id)
    require_admin_or_company_member(db, caller, job.company_id)

    db.delete(job)
    commit_or_raise(db)
