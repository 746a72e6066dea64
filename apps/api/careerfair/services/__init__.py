from careerfair.services.fairs_service import (
    AdminEnrollment,
    InviteEnrollment,
    create_fair,
    enroll_company,
    leave_fair,
    list_enrollments,
    remove_company,
    rotate_invite_code,
    toggle_fair_live,
    update_fair,
)
from careerfair.services.invite_codes import generate_invite_code, validate_invite_code
from careerfair.services.visibility import can_view_fair_content

__all__ = [
    "AdminEnrollment",
    "InviteEnrollment",
    "create_fair",
    "update_fair",
    "toggle_fair_live",
    "rotate_invite_code",
    "enroll_company",
    "remove_company",
    "leave_fair",
    "list_enrollments",
    "generate_invite_code",
    "validate_invite_code",
    "can_view_fair_content",
]
