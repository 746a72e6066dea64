"""Local-only helpers: mint bearer tokens and seed company records.

Identity issuance and company management belong to other services in a
real deployment; these routes stand in for them on a laptop.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from careerfair.api.schemas.fairs import SchemaBase
from careerfair.auth.caller import Role
from careerfair.auth.jwt import create_access_token
from careerfair.db import get_db
from careerfair.models import Company, CompanyJob

router = APIRouter(prefix="/dev", tags=["dev"])

DBSession = Annotated[Session, Depends(get_db)]


class DevTokenIn(SchemaBase):
    user_id: str
    role: Role
    company_id: uuid.UUID | None = None


class DevTokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/token", response_model=DevTokenOut)
def dev_token(payload: DevTokenIn):
    token = create_access_token(payload.user_id, payload.role, payload.company_id)
    return DevTokenOut(access_token=token)


class DevCompanyIn(SchemaBase):
    company_name: str = Field(min_length=1)
    owner_id: str
    representative_ids: list[str] = Field(default_factory=list)
    industry: str | None = None
    description: str | None = None
    website: str | None = None


@router.post("/companies")
def dev_create_company(payload: DevCompanyIn, db: DBSession):
    company = Company(**payload.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    return {"companyId": str(company.id), "companyName": company.company_name}


class DevCompanyJobIn(SchemaBase):
    name: str = Field(min_length=1)
    description: str | None = None
    majors_associated: str | None = None
    application_link: str | None = None


@router.post("/companies/{company_id}/jobs")
def dev_create_company_job(company_id: uuid.UUID, payload: DevCompanyJobIn, db: DBSession):
    if not db.get(Company, company_id):
        raise HTTPException(status_code=404, detail="company not found")

    job = CompanyJob(company_id=company_id, **payload.model_dump())
    db.add(job)
    db.commit()
    db.refresh(job)
    return {"jobId": str(job.id), "companyId": str(company_id)}
