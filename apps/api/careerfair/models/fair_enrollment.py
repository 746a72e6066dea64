import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from careerfair.models.base import Base, UUIDPrimaryKeyMixin, utcnow


class EnrollmentMethod(str, enum.Enum):
    ADMIN = "admin"
    INVITE = "invite"


class FairEnrollment(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "fair_enrollments"
    __table_args__ = (
        UniqueConstraint("fair_id", "company_id", name="uq_fair_enrollment_fair_company"),
    )

    fair_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fairs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    booth_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fair_booths.id"), unique=True, nullable=False
    )
    company_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    enrollment_method: Mapped[EnrollmentMethod] = mapped_column(
        Enum(
            EnrollmentMethod,
            name="enrollment_method",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    enrolled_by: Mapped[str] = mapped_column(String(128), nullable=False)
    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
