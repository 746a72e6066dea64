from __future__ import annotations

import uuid

import jwt
import pytest

from careerfair.auth.caller import Role
from careerfair.auth.jwt import caller_from_claims, create_access_token, verify_access_token
from careerfair.core.config import settings


def test_token_round_trip_carries_company():
    company_id = uuid.uuid4()
    token = create_access_token("rep-1", Role.REPRESENTATIVE, company_id)

    caller = caller_from_claims(verify_access_token(token))

    assert caller.user_id == "rep-1"
    assert caller.role == Role.REPRESENTATIVE
    assert caller.company_id == company_id
    assert caller.is_company_member
    assert not caller.is_admin


def test_expired_token_rejected():
    token = create_access_token("student-1", Role.STUDENT, ttl_seconds=-60)
    with pytest.raises(ValueError):
        verify_access_token(token)


def test_foreign_audience_rejected():
    token = jwt.encode(
        {"sub": "x", "role": "student", "exp": 9999999999, "iss": settings.jwt_issuer, "aud": "other"},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(ValueError):
        verify_access_token(token)


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "x", "role": "janitor"},
        {"sub": "x", "role": "companyOwner", "company_id": "not-a-uuid"},
    ],
)
def test_bad_claims_rejected(claims):
    with pytest.raises(ValueError):
        caller_from_claims(claims)


def test_my_enrollments_requires_token(client):
    resp = client.get("/api/fairs/my-enrollments")
    assert resp.status_code == 401
    assert resp.json()["detail"]["code"] == "UNAUTHENTICATED"


def test_dev_token_route_mints_usable_token(client):
    resp = client.post("/dev/token", json={"userId": "admin-9", "role": "administrator"})
    assert resp.status_code == 200
    token = resp.json()["access_token"]

    created = client.post(
        "/api/fairs", json={"name": "Dev Fair"}, headers={"Authorization": f"Bearer {token}"}
    )
    assert created.status_code == 201
