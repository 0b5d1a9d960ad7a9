from __future__ import annotations

from typing import Optional


class NoteError(Exception):
    """Base error for the note creation path.

    `client_error` tells whether the caller caused the failure; `status_code`
    is the HTTP status the error maps to.
    """

    status_code = 500
    client_error = False
    public_message = "Internal error"


class ValidationError(NoteError):
    status_code = 400
    client_error = True
    public_message = "Invalid request body"


class AuthorizationMissing(NoteError):
    status_code = 401
    client_error = True
    public_message = "Missing identity claim"


class StorageError(NoteError):
    def __init__(self, action: str, cause: Optional[BaseException] = None):
        super().__init__(f"Storage action '{action}' failed: {cause!r}")
        self.action = action
        self.cause = cause
        self.__cause__ = cause
