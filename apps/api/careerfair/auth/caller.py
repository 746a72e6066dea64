from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass


class Role(str, enum.Enum):
    ADMINISTRATOR = "administrator"
    COMPANY_OWNER = "companyOwner"
    REPRESENTATIVE = "representative"
    STUDENT = "student"


COMPANY_ROLES = frozenset({Role.COMPANY_OWNER, Role.REPRESENTATIVE})


@dataclass(frozen=True)
class Caller:
    """Verified identity of the requester, resolved once per request."""

    user_id: str
    role: Role
    company_id: uuid.UUID | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMINISTRATOR

    @property
    def is_company_member(self) -> bool:
        return self.role in COMPANY_ROLES
