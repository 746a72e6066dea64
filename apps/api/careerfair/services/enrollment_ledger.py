from __future__ import annotations

import uuid
from dataclasses import dataclass

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from careerfair.models import (
    BoothApplication,
    Company,
    Fair,
    FairBooth,
    FairEnrollment,
    FairJob,
)
from careerfair.models.fair_enrollment import EnrollmentMethod


@dataclass(frozen=True)
class RemovalSummary:
    booth_id: uuid.UUID
    jobs_removed: int
    applications_removed: int


def get_enrollment(
    db: Session,
    fair_id: uuid.UUID,
    company_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> FairEnrollment | None:
    stmt = select(FairEnrollment).where(
        FairEnrollment.fair_id == fair_id,
        FairEnrollment.company_id == company_id,
    )
    if for_update:
        stmt = stmt.with_for_update()
    return db.scalar(stmt)


def list_enrollments(db: Session, fair_id: uuid.UUID) -> list[FairEnrollment]:
    return list(
        db.scalars(
            select(FairEnrollment)
            .where(FairEnrollment.fair_id == fair_id)
            .order_by(FairEnrollment.enrolled_at, FairEnrollment.company_name)
        )
    )


def list_company_enrollments(db: Session, company_id: uuid.UUID) -> list[FairEnrollment]:
    return list(
        db.scalars(
            select(FairEnrollment)
            .where(FairEnrollment.company_id == company_id)
            .order_by(FairEnrollment.enrolled_at.desc())
        )
    )


def stage_enrollment(
    db: Session,
    *,
    fair: Fair,
    company: Company,
    booth: FairBooth,
    method: EnrollmentMethod,
    enrolled_by: str,
) -> FairEnrollment:
    """Insert the enrollment row without committing.

    The (fair_id, company_id) unique constraint turns this into a
    create-if-absent; a concurrent duplicate surfaces as IntegrityError
    from the flush.
    """
    enrollment = FairEnrollment(
        fair_id=fair.id,
        company_id=company.id,
        booth_id=booth.id,
        company_name=company.company_name,
        enrollment_method=method,
        enrolled_by=enrolled_by,
    )
    db.add(enrollment)
    db.flush()
    return enrollment


def stage_removal(db: Session, enrollment: FairEnrollment) -> RemovalSummary | None:
    """Delete the enrollment and everything it owns, without committing.

    Returns None when the enrollment row was already gone (a concurrent
    removal won); the caller must roll back in that case.
    """
    fair_id = enrollment.fair_id
    company_id = enrollment.company_id
    booth_id = enrollment.booth_id

    jobs = db.execute(
        delete(FairJob)
        .where(FairJob.fair_id == fair_id, FairJob.company_id == company_id)
        .execution_options(synchronize_session=False)
    )
    removed = db.execute(
        delete(FairEnrollment)
        .where(FairEnrollment.id == enrollment.id)
        .execution_options(synchronize_session=False)
    )
    if removed.rowcount == 0:
        return None

    applications = db.execute(
        delete(BoothApplication)
        .where(BoothApplication.booth_id == booth_id)
        .execution_options(synchronize_session=False)
    )
    db.execute(
        delete(FairBooth)
        .where(FairBooth.id == booth_id)
        .execution_options(synchronize_session=False)
    )
    db.expunge(enrollment)

    return RemovalSummary(
        booth_id=booth_id,
        jobs_removed=jobs.rowcount or 0,
        applications_removed=applications.rowcount or 0,
    )
