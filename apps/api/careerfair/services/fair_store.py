from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from careerfair.models import Fair
from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import NotFoundError


def get_fair(db: Session, fair_id: uuid.UUID, *, for_update: bool = False) -> Fair:
    stmt = select(Fair).where(Fair.id == fair_id)
    if for_update:
        stmt = stmt.with_for_update()
    fair = db.scalar(stmt)
    if not fair:
        raise NotFoundError(ErrorCode.FAIR_NOT_FOUND.value, "fair not found")
    return fair


def reload_fair(db: Session, fair_id: uuid.UUID) -> Fair:
    fair = db.get(Fair, fair_id, populate_existing=True)
    if not fair:
        raise NotFoundError(ErrorCode.FAIR_NOT_FOUND.value, "fair not found")
    return fair


def list_fairs(db: Session) -> list[Fair]:
    return list(db.scalars(select(Fair).order_by(Fair.created_at.desc(), Fair.name)))


def get_fairs_by_ids(db: Session, fair_ids: list[uuid.UUID]) -> dict[uuid.UUID, Fair]:
    if not fair_ids:
        return {}
    fairs = db.scalars(select(Fair).where(Fair.id.in_(fair_ids)))
    return {fair.id: fair for fair in fairs}
