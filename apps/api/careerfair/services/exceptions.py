class ServiceError(Exception):
    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or code
        super().__init__(self.message)


class NotFoundError(ServiceError):
    pass


class AuthorizationError(ServiceError):
    pass


class UnauthenticatedError(AuthorizationError):
    pass


class ConflictError(ServiceError):
    pass


class ValidationError(ServiceError):
    pass


class InvalidInviteCodeError(ValidationError):
    pass


class ExhaustedError(ServiceError):
    """Invite code space ran out of free values; an operator problem."""


class StorageError(ServiceError):
    pass
