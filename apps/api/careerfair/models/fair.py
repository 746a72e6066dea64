from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from careerfair.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Fair(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "fairs"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Manual override only; never derived from the schedule.
    is_live: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    # Self-service enrollment token, rotated in place.
    invite_code: Mapped[str] = mapped_column(String(8), unique=True, nullable=False, index=True)

    created_by: Mapped[str | None] = mapped_column(String(128), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(128), nullable=True)
