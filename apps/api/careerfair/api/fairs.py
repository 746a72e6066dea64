from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerfair.api.errors import http_error_from_service
from careerfair.api.schemas import (
    EnrollIn,
    EnrollmentListOut,
    EnrollmentOut,
    FairCreate,
    FairListOut,
    FairOut,
    FairStatusOut,
    FairUpdate,
    InviteCodeOut,
    MyEnrollmentListOut,
    SuccessOut,
)
from careerfair.api.schemas.fairs import MyEnrollmentOut
from careerfair.auth.caller import Caller
from careerfair.auth.deps import CurrentCaller, OptionalCaller
from careerfair.db import get_db
from careerfair.models import Fair
from careerfair.services import fairs_service
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import ServiceError, ValidationError
from careerfair.services.fair_store import get_fair, list_fairs

router = APIRouter(prefix="/fairs", tags=["fairs"])

DBSession = Annotated[Session, Depends(get_db)]


def _fair_out(fair: Fair, caller: Caller | None) -> FairOut:
    out = FairOut.model_validate(fair)
    if caller is None or not caller.is_admin:
        out = out.model_copy(update={"invite_code": None})
    return out


def _enrollment_request(payload: EnrollIn, caller: Caller) -> fairs_service.EnrollmentRequest:
    if payload.invite_code:
        company_id = payload.company_id or caller.company_id
        if company_id is None:
            raise ValidationError(
                ErrorCode.NO_COMPANY.value, "user is not associated with a company"
            )
        return fairs_service.InviteEnrollment(company_id=company_id, code=payload.invite_code)
    if payload.company_id:
        return fairs_service.AdminEnrollment(company_id=payload.company_id)
    raise ValidationError(
        ErrorCode.ENROLLMENT_TARGET_REQUIRED.value, "either companyId or inviteCode is required"
    )


@router.get("", response_model=FairListOut)
def get_fairs(db: DBSession):
    return FairListOut(fairs=[_fair_out(fair, None) for fair in list_fairs(db)])


@router.post("", response_model=FairOut, status_code=201)
def create_fair(payload: FairCreate, db: DBSession, caller: CurrentCaller):
    try:
        fair = fairs_service.create_fair(db, caller, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _fair_out(fair, caller)


@router.get("/my-enrollments", response_model=MyEnrollmentListOut)
def my_enrollments(db: DBSession, caller: CurrentCaller):
    enrollments = fairs_service.list_my_enrollments(db, caller)
    return MyEnrollmentListOut(
        enrollments=[MyEnrollmentOut.model_validate(e) for e in enrollments]
    )


@router.get("/{fair_id}", response_model=FairOut)
def get_fair_detail(fair_id: uuid.UUID, db: DBSession, caller: OptionalCaller):
    try:
        fair = get_fair(db, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _fair_out(fair, caller)


@router.get("/{fair_id}/status", response_model=FairStatusOut)
def get_fair_status(fair_id: uuid.UUID, db: DBSession):
    try:
        fair = get_fair(db, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return FairStatusOut(is_live=fair.is_live)


@router.put("/{fair_id}", response_model=FairOut)
def update_fair(fair_id: uuid.UUID, payload: FairUpdate, db: DBSession, caller: CurrentCaller):
    try:
        fair = fairs_service.update_fair(db, caller, fair_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _fair_out(fair, caller)


@router.post("/{fair_id}/toggle-status", response_model=FairOut)
def toggle_status(fair_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        fair = fairs_service.toggle_fair_live(db, caller, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _fair_out(fair, caller)


@router.post("/{fair_id}/refresh-invite-code", response_model=InviteCodeOut)
def refresh_invite_code(fair_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        code = fairs_service.rotate_invite_code(db, caller, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return InviteCodeOut(invite_code=code)


@router.get("/{fair_id}/enrollments", response_model=EnrollmentListOut)
def get_enrollments(fair_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        enrollments = fairs_service.list_enrollments(db, caller, fair_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return EnrollmentListOut(
        enrollments=[EnrollmentOut.model_validate(e) for e in enrollments]
    )


@router.post("/{fair_id}/enroll", response_model=EnrollmentOut, status_code=201)
def enroll(fair_id: uuid.UUID, payload: EnrollIn, db: DBSession, caller: CurrentCaller):
    try:
        request = _enrollment_request(payload, caller)
        enrollment = fairs_service.enroll_company(db, caller, fair_id, request)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return EnrollmentOut.model_validate(enrollment)


@router.delete("/{fair_id}/enrollments/{company_id}", response_model=SuccessOut)
def remove_company(
    fair_id: uuid.UUID, company_id: uuid.UUID, db: DBSession, caller: CurrentCaller
):
    try:
        fairs_service.remove_company(db, caller, fair_id, company_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return SuccessOut()


@router.delete("/{fair_id}/leave", response_model=SuccessOut)
def leave(fair_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        if caller.company_id is None:
            raise ValidationError(
                ErrorCode.NO_COMPANY.value, "you are not associated with a company"
            )
        fairs_service.leave_fair(db, caller, fair_id, caller.company_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return SuccessOut()
