"""Fair-scoped booths and jobs. Reads go through the visibility gate."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from careerfair.api.errors import http_error_from_service
from careerfair.api.schemas import (
    BoothApplicationOut,
    BoothListOut,
    BoothOut,
    BoothUpdate,
    JobCreate,
    JobListOut,
    JobOut,
    JobUpdate,
    SuccessOut,
)
from careerfair.auth.deps import CurrentCaller, OptionalCaller
from careerfair.db import get_db
from careerfair.services import booths_service, jobs_service
from careerfair.services.exceptions import ServiceError

router = APIRouter(prefix="/fairs/{fair_id}", tags=["fair content"])

DBSession = Annotated[Session, Depends(get_db)]


@router.get("/booths", response_model=BoothListOut)
def list_booths(fair_id: uuid.UUID, db: DBSession, caller: OptionalCaller):
    try:
        booths = booths_service.list_booths(db, caller, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return BoothListOut(booths=[BoothOut.model_validate(b) for b in booths])


@router.get("/booths/{booth_id}", response_model=BoothOut)
def get_booth(fair_id: uuid.UUID, booth_id: uuid.UUID, db: DBSession, caller: OptionalCaller):
    try:
        booth = booths_service.get_booth(db, caller, fair_id, booth_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return BoothOut.model_validate(booth)


@router.put("/booths/{booth_id}", response_model=BoothOut)
def update_booth(
    fair_id: uuid.UUID,
    booth_id: uuid.UUID,
    payload: BoothUpdate,
    db: DBSession,
    caller: CurrentCaller,
):
    try:
        booth = booths_service.update_booth(db, caller, fair_id, booth_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return BoothOut.model_validate(booth)


@router.post(
    "/booths/{booth_id}/applications", response_model=BoothApplicationOut, status_code=201
)
def apply_to_booth(
    fair_id: uuid.UUID, booth_id: uuid.UUID, db: DBSession, caller: OptionalCaller
):
    try:
        application = booths_service.apply_to_booth(db, caller, fair_id, booth_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return BoothApplicationOut.model_validate(application)


@router.get("/company/{company_id}/booth", response_model=BoothOut)
def get_company_booth(
    fair_id: uuid.UUID, company_id: uuid.UUID, db: DBSession, caller: CurrentCaller
):
    try:
        booth = booths_service.get_company_booth(db, caller, fair_id, company_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return BoothOut.model_validate(booth)


@router.get("/jobs", response_model=JobListOut)
def list_jobs(
    fair_id: uuid.UUID,
    db: DBSession,
    caller: OptionalCaller,
    company_id: uuid.UUID | None = Query(default=None, alias="companyId"),
):
    try:
        jobs = jobs_service.list_jobs(db, caller, fair_id, company_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return JobListOut(jobs=[JobOut.model_validate(j) for j in jobs])


@router.post("/jobs", response_model=JobOut, status_code=201)
def create_job(fair_id: uuid.UUID, payload: JobCreate, db: DBSession, caller: CurrentCaller):
    try:
        job = jobs_service.create_job(db, caller, fair_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return JobOut.model_validate(job)


@router.put("/jobs/{job_id}", response_model=JobOut)
def update_job(
    fair_id: uuid.UUID,
    job_id: uuid.UUID,
    payload: JobUpdate,
    db: DBSession,
    caller: CurrentCaller,
):
    try:
        job = jobs_service.update_job(db, caller, fair_id, job_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return JobOut.model_validate(job)


@router.delete("/jobs/{job_id}", response_model=SuccessOut)
def delete_job(fair_id: uuid.UUID, job_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        jobs_service.delete_job(db, caller, fair_id, job_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return SuccessOut()
