from careerfair.models.base import Base
from careerfair.models.company import Company, CompanyJob
from careerfair.models.fair import Fair
from careerfair.models.fair_booth import BoothApplication, FairBooth
from careerfair.models.fair_enrollment import FairEnrollment
from careerfair.models.fair_job import FairJob

__all__ = [
    "Base",
    "Company",
    "CompanyJob",
    "Fair",
    "FairBooth",
    "BoothApplication",
    "FairEnrollment",
    "FairJob",
]
