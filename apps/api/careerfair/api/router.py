from fastapi import APIRouter

from careerfair.api.companies import router as companies_router
from careerfair.api.fair_content import router as fair_content_router
from careerfair.api.fairs import router as fairs_router

router = APIRouter()
router.include_router(fairs_router)
router.include_router(fair_content_router)
router.include_router(companies_router)
