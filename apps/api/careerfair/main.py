from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import SQLAlchemyError

from careerfair.api.dev import router as dev_router
from careerfair.api.errors import request_validation_handler, storage_error_handler
from careerfair.api.router import router as api_router
from careerfair.core.config import settings
from careerfair.core.logging import configure_logging
from careerfair.middleware.rate_limit import RateLimitMiddleware
from careerfair.middleware.request_id import RequestIdMiddleware
from careerfair.middleware.security_headers import SecurityHeadersMiddleware

configure_logging()

app = FastAPI(title="Career Fair API")

# Starlette runs the LAST added middleware FIRST (outermost).
# RequestId + SecurityHeaders wrap everything, rate limiting sits innermost.
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(SQLAlchemyError, storage_error_handler)

Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)


@app.get("/")
def root():
    return {"name": "Career Fair API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")

if settings.dev_routes_enabled and settings.env == "local":
    app.include_router(dev_router)
