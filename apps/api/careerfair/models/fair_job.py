import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from careerfair.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class FairJob(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "fair_jobs"

    fair_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fairs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Set when the job was copied from the company's standing postings.
    source_job_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    majors_associated: Mapped[str | None] = mapped_column(String(500), nullable=True)
    application_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
