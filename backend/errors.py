"""
Error kinds raised by the stores.

Each kind carries the HTTP status it maps to; main.py turns any of them into
a {"message": ...} response with that status.
"""

from typing import Optional


class RecipeHubError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(RecipeHubError):
    status_code = 400
    default_message = "Missing fields"


class Unauthorized(RecipeHubError):
    status_code = 401
    default_message = "Invalid access token"


class Forbidden(RecipeHubError):
    status_code = 403
    default_message = "Not allowed"


class NotFound(RecipeHubError):
    status_code = 404
    default_message = "Not found"


class Conflict(RecipeHubError):
    status_code = 409
    default_message = "Conflict"
