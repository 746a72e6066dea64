from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import StorageError


@contextmanager
def rollback_on_error(db: Session) -> Iterator[None]:
    """Roll back whatever the block staged if it raises.

    IntegrityError is re-raised untouched so callers can map constraint
    violations to domain errors; any other SQLAlchemy error, whether from a
    flush, a Core statement or the commit, becomes StorageError.
    """
    try:
        yield
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(ErrorCode.STORAGE_ERROR.value, "storage failure") from exc
    except Exception:
        db.rollback()
        raise


def commit_or_raise(db: Session) -> None:
    with rollback_on_error(db):
        db.commit()
