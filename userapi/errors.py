class ApiError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code: int = 500
    message: str = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(ApiError):
    status_code = 401
    message = "Authorization token is required."


class Forbidden(ApiError):
    status_code = 403
    message = "Role must be admin to perform this action."


class InvalidInput(ApiError):
    status_code = 400
    message = "Malformed request."


class InvalidId(InvalidInput):
    message = "Invalid user id."


class NotFound(ApiError):
    status_code = 404
    message = "User not found."


class Conflict(ApiError):
    status_code = 409
    message = "Conflict."


class UsernameTaken(Conflict):
    message = "A user with this name already exists."


class Unavailable(ApiError):
    status_code = 500


class TokenMalformed(Exception):
    """Signature, encoding or claim structure of a bearer token is invalid."""
