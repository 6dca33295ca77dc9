"""Error hierarchy shared by the API layer and the services it calls.

Every error carries the HTTP status it maps to and a message that is safe to
show the end user. ``app.main`` renders them as ``{"error": message}``.
"""

from __future__ import annotations


class TBAssistError(Exception):
    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class GatewayNotConfigured(TBAssistError):
    status_code = 500
    default_message = "ANTHROPIC_API_KEY is not configured"


class GatewayRateLimited(TBAssistError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class GatewayPaymentRequired(TBAssistError):
    status_code = 402
    default_message = "Payment required. Please add credits to your workspace."


class GatewayFailure(TBAssistError):
    status_code = 500
    default_message = "AI analysis failed"


class InvalidImage(TBAssistError):
    status_code = 400
    default_message = "Please upload an image file (JPEG, PNG, etc.)"


class AuthError(TBAssistError):
    status_code = 401
    default_message = "Not authenticated"


class PermissionDenied(TBAssistError):
    status_code = 403
    default_message = "You do not have admin privileges."


class NotFound(TBAssistError):
    status_code = 404
    default_message = "Not found"


class Conflict(TBAssistError):
    status_code = 409
    default_message = "Conflict"
