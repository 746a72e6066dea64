from __future__ import annotations

import re
import secrets
import string
import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from careerfair.core.config import settings
from careerfair.models import Fair
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import ExhaustedError

logger = structlog.get_logger()

INVITE_CODE_LENGTH = 8
INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits

_INVITE_CODE_RE = re.compile(rf"^[A-Z0-9]{{{INVITE_CODE_LENGTH}}}$")


def _random_code() -> str:
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))


def normalize_invite_code(code: str | None) -> str:
    return (code or "").strip().upper()


def is_well_formed(code: str) -> bool:
    return bool(_INVITE_CODE_RE.match(code))


def _code_in_use(db: Session, code: str) -> bool:
    return db.scalar(select(Fair.id).where(Fair.invite_code == code)) is not None


def generate_invite_code(db: Session, max_attempts: int | None = None) -> str:
    """Draw a code no current fair holds.

    The unique index on ``fairs.invite_code`` still backs this up for the
    window between the check and the write.
    """
    attempts = max_attempts or settings.invite_code_max_attempts
    for attempt in range(1, attempts + 1):
        code = _random_code()
        if not _code_in_use(db, code):
            return code
        logger.warning("invite_code_collision", attempt=attempt)

    logger.error("invite_code_exhausted", attempts=attempts)
    raise ExhaustedError(
        ErrorCode.INVITE_CODE_EXHAUSTED.value,
        f"could not find a free invite code after {attempts} attempts",
    )


def validate_invite_code(db: Session, fair_id: uuid.UUID, code: str | None) -> bool:
    candidate = normalize_invite_code(code)
    if not is_well_formed(candidate):
        return False
    current = db.scalar(select(Fair.invite_code).where(Fair.id == fair_id))
    if current is None:
        return False
    return secrets.compare_digest(current, candidate)
