from __future__ import annotations

import re
import uuid

import pytest

from careerfair.api.schemas import FairCreate
from careerfair.services import fairs_service, invite_codes
from careerfair.services.exceptions import ExhaustedError
from tests.factories import ADMIN

CODE_RE = re.compile(r"^[A-Z0-9]{8}$")


def _create(db, name="Spring Fair"):
    return fairs_service.create_fair(db, ADMIN, FairCreate(name=name))


def test_generated_codes_are_eight_uppercase_alphanumerics(db_session):
    for _ in range(50):
        assert CODE_RE.match(invite_codes.generate_invite_code(db_session))


def test_codes_unique_across_fairs(db_session):
    fairs = [_create(db_session, name=f"Fair {i}") for i in range(20)]
    codes = [fair.invite_code for fair in fairs]
    assert len(set(codes)) == len(codes)


def test_generation_retries_past_collisions(db_session, monkeypatch):
    codes = iter(["DUPE0001", "DUPE0001", "DUPE0001", "FRESH002"])
    monkeypatch.setattr(invite_codes, "_random_code", lambda: next(codes))

    first = _create(db_session, name="First")
    second = _create(db_session, name="Second")

    assert first.invite_code == "DUPE0001"
    assert second.invite_code == "FRESH002"


def test_generation_gives_up_after_bounded_attempts(db_session, monkeypatch):
    monkeypatch.setattr(invite_codes, "_random_code", lambda: "SAME0000")
    _create(db_session, name="Holder")

    calls = []

    def _same():
        calls.append(1)
        return "SAME0000"

    monkeypatch.setattr(invite_codes, "_random_code", _same)
    with pytest.raises(ExhaustedError) as exc_info:
        invite_codes.generate_invite_code(db_session, max_attempts=10)

    assert exc_info.value.code == "INVITE_CODE_EXHAUSTED"
    assert len(calls) == 10


def test_validate_normalizes_case_and_whitespace(db_session):
    fair = _create(db_session)

    assert invite_codes.validate_invite_code(db_session, fair.id, fair.invite_code)
    assert invite_codes.validate_invite_code(db_session, fair.id, f"  {fair.invite_code.lower()} ")
    assert not invite_codes.validate_invite_code(db_session, fair.id, "BADCODE1")
    assert not invite_codes.validate_invite_code(db_session, fair.id, "")
    assert not invite_codes.validate_invite_code(db_session, fair.id, None)


def test_validate_unknown_fair_is_false(db_session):
    fair = _create(db_session)
    assert not invite_codes.validate_invite_code(db_session, uuid.uuid4(), fair.invite_code)


def test_rotation_invalidates_previous_code(db_session):
    fair = _create(db_session)
    old_code = fair.invite_code

    new_code = fairs_service.rotate_invite_code(db_session, ADMIN, fair.id)

    assert new_code != old_code
    assert CODE_RE.match(new_code)
    assert not invite_codes.validate_invite_code(db_session, fair.id, old_code)
    assert invite_codes.validate_invite_code(db_session, fair.id, new_code)


def test_rotation_retries_when_update_hits_a_taken_code(db_session, monkeypatch):
    holder = _create(db_session, name="Holder")
    fair = _create(db_session, name="Rotating")
    original = fair.invite_code

    # The availability check passed, but another fair holds the code by the
    # time the UPDATE runs.
    codes = iter([holder.invite_code, "ZZZZ9999"])
    monkeypatch.setattr(fairs_service, "generate_invite_code", lambda db: next(codes))

    assert fairs_service.rotate_invite_code(db_session, ADMIN, fair.id) == "ZZZZ9999"
    assert invite_codes.validate_invite_code(db_session, fair.id, "ZZZZ9999")
    assert not invite_codes.validate_invite_code(db_session, fair.id, original)
    assert invite_codes.validate_invite_code(db_session, holder.id, holder.invite_code)


def test_rotation_exhausts_when_every_update_collides(db_session, monkeypatch):
    holder = _create(db_session, name="Holder")
    fair = _create(db_session, name="Rotating")
    original = fair.invite_code
    taken = holder.invite_code

    monkeypatch.setattr(fairs_service, "generate_invite_code", lambda db: taken)

    with pytest.raises(ExhaustedError):
        fairs_service.rotate_invite_code(db_session, ADMIN, fair.id)

    assert invite_codes.validate_invite_code(db_session, fair.id, original)
