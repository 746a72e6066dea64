from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from careerfair.models.base import ensure_utc
from careerfair.models.fair_booth import BoothApplicationStatus
from careerfair.models.fair_enrollment import EnrollmentMethod


class SchemaBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UTCMixin(BaseModel):
    """Naive timestamps are read as UTC, aware ones are converted to UTC."""

    @field_validator(
        "start_time",
        "end_time",
        "created_at",
        "updated_at",
        "enrolled_at",
        mode="after",
        check_fields=False,
    )
    @classmethod
    def _validate_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)


class FairCreate(UTCMixin, SchemaBase):
    name: str | None = None
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class FairUpdate(UTCMixin, SchemaBase):
    name: str | None = None
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class FairOut(UTCMixin, SchemaBase):
    id: UUID
    name: str
    description: str | None = None
    is_live: bool
    start_time: datetime | None = None
    end_time: datetime | None = None
    invite_code: str | None = None
    created_at: datetime
    updated_at: datetime


class FairListOut(SchemaBase):
    fairs: list[FairOut]


class FairStatusOut(SchemaBase):
    is_live: bool


class InviteCodeOut(SchemaBase):
    invite_code: str


class EnrollIn(SchemaBase):
    company_id: UUID | None = None
    invite_code: str | None = None


class EnrollmentOut(UTCMixin, SchemaBase):
    fair_id: UUID
    company_id: UUID
    company_name: str
    booth_id: UUID
    enrollment_method: EnrollmentMethod
    enrolled_by: str
    enrolled_at: datetime


class EnrollmentListOut(SchemaBase):
    enrollments: list[EnrollmentOut]


class CompanyFairOut(UTCMixin, SchemaBase):
    id: UUID
    name: str
    description: str | None = None
    is_live: bool
    start_time: datetime | None = None
    end_time: datetime | None = None
    booth_id: UUID
    enrolled_at: datetime


class CompanyFairListOut(SchemaBase):
    fairs: list[CompanyFairOut]


class MyEnrollmentOut(UTCMixin, SchemaBase):
    fair_id: UUID
    booth_id: UUID
    enrolled_at: datetime


class MyEnrollmentListOut(SchemaBase):
    enrollments: list[MyEnrollmentOut]


class SuccessOut(SchemaBase):
    success: bool = True


class BoothUpdate(SchemaBase):
    company_name: str | None = None
    industry: str | None = None
    company_size: str | None = None
    location: str | None = None
    description: str | None = None
    logo_url: str | None = None
    website: str | None = None
    careers_page: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    hiring_for: str | None = None


class BoothOut(UTCMixin, SchemaBase):
    id: UUID
    fair_id: UUID
    company_id: UUID
    company_name: str
    industry: str | None = None
    company_size: str | None = None
    location: str | None = None
    description: str | None = None
    logo_url: str | None = None
    website: str | None = None
    careers_page: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    hiring_for: str | None = None
    created_at: datetime
    updated_at: datetime


class BoothListOut(SchemaBase):
    booths: list[BoothOut]


class BoothApplicationOut(UTCMixin, SchemaBase):
    id: UUID
    fair_id: UUID
    booth_id: UUID
    student_id: str
    status: BoothApplicationStatus
    created_at: datetime


class JobCreate(SchemaBase):
    company_id: UUID | None = None
    name: str | None = None
    description: str | None = None
    majors_associated: str | None = None
    application_link: str | None = None


class JobUpdate(SchemaBase):
    name: str | None = None
    description: str | None = None
    majors_associated: str | None = None
    application_link: str | None = None


class JobOut(UTCMixin, SchemaBase):
    id: UUID
    fair_id: UUID
    company_id: UUID
    source_job_id: UUID | None = None
    name: str
    description: str | None = None
    majors_associated: str | None = None
    application_link: str | None = None
    created_at: datetime
    updated_at: datetime


class JobListOut(SchemaBase):
    jobs: list[JobOut]
