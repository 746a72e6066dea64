from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerfair.api.errors import http_error_from_service
from careerfair.api.schemas import CompanyFairListOut
from careerfair.api.schemas.fairs import CompanyFairOut
from careerfair.auth.deps import CurrentCaller
from careerfair.db import get_db
from careerfair.services import fairs_service
from careerfair.services.exceptions import ServiceError

router = APIRouter(prefix="/companies", tags=["companies"])

DBSession = Annotated[Session, Depends(get_db)]


@router.get("/{company_id}/fairs", response_model=CompanyFairListOut)
def company_fairs(company_id: uuid.UUID, db: DBSession, caller: CurrentCaller):
    try:
        rows = fairs_service.list_company_fairs(db, caller, company_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return CompanyFairListOut(
        fairs=[
            CompanyFairOut(
                id=fair.id,
                name=fair.name,
                description=fair.description,
                is_live=fair.is_live,
                start_time=fair.start_time,
                end_time=fair.end_time,
                booth_id=enrollment.booth_id,
                enrolled_at=enrollment.enrolled_at,
            )
            for fair, enrollment in rows
        ]
    )
