import uuid

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from careerfair.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

BOOTH_PROFILE_FIELDS = (
    "industry",
    "company_size",
    "location",
    "description",
    "logo_url",
    "website",
    "careers_page",
    "contact_name",
    "contact_email",
    "contact_phone",
    "hiring_for",
)


class BoothProfileMixin:
    industry: Mapped[str | None] = mapped_column(String(200), nullable=True)
    company_size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[str | None] = mapped_column(String(300), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    careers_page: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contact_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    hiring_for: Mapped[str | None] = mapped_column(Text, nullable=True)


class Company(Base, UUIDPrimaryKeyMixin, TimestampMixin, BoothProfileMixin):
    """Company directory record, owned by the company management surface."""

    __tablename__ = "companies"

    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    owner_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    representative_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def has_member(self, user_id: str) -> bool:
        return self.owner_id == user_id or user_id in (self.representative_ids or [])


class CompanyJob(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A company's standing job posting, copied into each fair it joins."""

    __tablename__ = "company_jobs"

    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    majors_associated: Mapped[str | None] = mapped_column(String(500), nullable=True)
    application_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
