from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NAME_REQUIRED = "NAME_REQUIRED"
    INVALID_SCHEDULE = "INVALID_SCHEDULE"
    NO_CHANGES = "NO_CHANGES"
    ENROLLMENT_TARGET_REQUIRED = "ENROLLMENT_TARGET_REQUIRED"
    NO_COMPANY = "NO_COMPANY"
    INVALID_INVITE_CODE = "INVALID_INVITE_CODE"

    UNAUTHENTICATED = "UNAUTHENTICATED"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    NOT_COMPANY_MEMBER = "NOT_COMPANY_MEMBER"
    STUDENT_REQUIRED = "STUDENT_REQUIRED"
    FAIR_NOT_LIVE = "FAIR_NOT_LIVE"

    FAIR_NOT_FOUND = "FAIR_NOT_FOUND"
    COMPANY_NOT_FOUND = "COMPANY_NOT_FOUND"
    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    BOOTH_NOT_FOUND = "BOOTH_NOT_FOUND"
    JOB_NOT_FOUND = "JOB_NOT_FOUND"

    ALREADY_ENROLLED = "ALREADY_ENROLLED"
    LEAVE_BLOCKED = "LEAVE_BLOCKED"
    ALREADY_APPLIED = "ALREADY_APPLIED"

    INVITE_CODE_EXHAUSTED = "INVITE_CODE_EXHAUSTED"
    STORAGE_ERROR = "STORAGE_ERROR"
