"""Service errors. Each carries the HTTP status the API layer answers with."""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class DuplicateEmail(ServiceError):
    status_code = 400

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class InvalidCredentials(ServiceError):
    """Unknown email and wrong password look the same to the caller."""

    status_code = 401

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFound(ServiceError):
    status_code = 404


class InternalError(ServiceError):
    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
