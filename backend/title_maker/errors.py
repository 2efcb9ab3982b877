"""Structured action errors.

Every failure surfaced to a caller carries a stable ``code`` and a
human-readable ``message``. The HTTP layer renders them as
``{"error": {"code": ..., "message": ...}}``.
"""


class ActionError(Exception):
    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class UnauthorizedError(ActionError):
    """No caller identity was supplied with the request."""

    code = "UNAUTHORIZED"
    status_code = 401


class NotFoundError(ActionError):
    """Entity is missing or belongs to another user.

    The two cases are intentionally indistinguishable so that callers
    cannot probe for other users' sessions.
    """

    code = "NOT_FOUND"
    status_code = 404


class ActionValidationError(ActionError):
    code = "BAD_REQUEST"
    status_code = 422
