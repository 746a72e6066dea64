from careerfair.api.schemas.fairs import (
    BoothApplicationOut,
    BoothListOut,
    BoothOut,
    BoothUpdate,
    CompanyFairListOut,
    EnrollIn,
    EnrollmentListOut,
    EnrollmentOut,
    FairCreate,
    FairListOut,
    FairOut,
    FairStatusOut,
    FairUpdate,
    InviteCodeOut,
    JobCreate,
    JobListOut,
    JobOut,
    JobUpdate,
    MyEnrollmentListOut,
    SuccessOut,
)

__all__ = [
    "BoothApplicationOut",
    "BoothListOut",
    "BoothOut",
    "BoothUpdate",
    "CompanyFairListOut",
    "EnrollIn",
    "EnrollmentListOut",
    "EnrollmentOut",
    "FairCreate",
    "FairListOut",
    "FairOut",
    "FairStatusOut",
    "FairUpdate",
    "InviteCodeOut",
    "JobCreate",
    "JobListOut",
    "JobOut",
    "JobUpdate",
    "MyEnrollmentListOut",
    "SuccessOut",
]
