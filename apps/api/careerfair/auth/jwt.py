from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from jwt import PyJWTError

from careerfair.auth.caller import Caller, Role
from careerfair.core.config import settings


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    user_id: str,
    role: Role | str,
    company_id: uuid.UUID | str | None = None,
    ttl_seconds: int | None = None,
) -> str:
    """Mint a token the way the identity provider does; used by dev routes and tests."""
    now = _now()
    exp = now + timedelta(seconds=ttl_seconds or settings.access_token_ttl_seconds)
    payload = {
        "sub": str(user_id),
        "role": Role(role).value,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    if company_id is not None:
        payload["company_id"] = str(company_id)
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            options={"require": ["sub", "role", "exp"]},
        )
    except PyJWTError as exc:
        raise ValueError("invalid access token") from exc


def caller_from_claims(claims: dict) -> Caller:
    try:
        role = Role(claims["role"])
    except (KeyError, ValueError) as exc:
        raise ValueError("unknown role claim") from exc

    raw_company = claims.get("company_id")
    try:
        company_id = uuid.UUID(raw_company) if raw_company else None
    except ValueError as exc:
        raise ValueError("invalid company_id claim") from exc

    return Caller(user_id=str(claims["sub"]), role=role, company_id=company_id)
