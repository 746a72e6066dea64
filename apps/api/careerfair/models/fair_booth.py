import enum
import uuid

from sqlalchemy import Enum, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from careerfair.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from careerfair.models.company import BoothProfileMixin


class FairBooth(Base, UUIDPrimaryKeyMixin, TimestampMixin, BoothProfileMixin):
    """A company's presence inside one fair, snapshotted from its profile."""

    __tablename__ = "fair_booths"

    fair_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fairs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    enrolled_by: Mapped[str] = mapped_column(String(128), nullable=False)


class BoothApplicationStatus(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class BoothApplication(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "booth_applications"
    __table_args__ = (
        UniqueConstraint("booth_id", "student_id", name="uq_booth_application_booth_student"),
    )

    fair_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fairs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    booth_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fair_booths.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[str] = mapped_column(String(128), nullable=False)
    status: Mapped[BoothApplicationStatus] = mapped_column(
        Enum(
            BoothApplicationStatus,
            name="booth_application_status",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=BoothApplicationStatus.OPEN,
    )
