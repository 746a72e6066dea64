from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from careerfair.auth.caller import Caller
from careerfair.auth.jwt import caller_from_claims, verify_access_token


def _unauthorized(detail: str = "unauthorized") -> HTTPException:
    return HTTPException(
        status_code=401,
        detail={"code": "UNAUTHENTICATED", "message": detail},
        headers={"WWW-Authenticate": "Bearer"},
    )


def _bearer_token(request: Request) -> str | None:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return None
    return auth.removeprefix("Bearer ").strip() or None


def _resolve(token: str) -> Caller:
    try:
        return caller_from_claims(verify_access_token(token))
    except ValueError as exc:
        raise _unauthorized(str(exc)) from None


def get_current_caller(request: Request) -> Caller:
    token = _bearer_token(request)
    if token is None:
        raise _unauthorized("missing bearer token")
    return _resolve(token)


def get_optional_caller(request: Request) -> Caller | None:
    """Anonymous requests pass through as None; a bad token is still a 401."""
    token = _bearer_token(request)
    if token is None:
        return None
    return _resolve(token)


CurrentCaller = Annotated[Caller, Depends(get_current_caller)]
OptionalCaller = Annotated[Caller | None, Depends(get_optional_caller)]
