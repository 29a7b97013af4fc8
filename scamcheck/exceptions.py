from typing import Optional

MAX_DETAILS_LENGTH = 200


class ScamCheckError(Exception):
    """Base for every failure that is turned into an `{error, details?}` response."""

    status_code: int = 500
    error: str = "Unexpected server error."

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None):
        self.error = error or self.error
        self.details = details[:MAX_DETAILS_LENGTH] if details is not None else None
        super().__init__(self.error)


class MethodNotAllowed(ScamCheckError):
    status_code = 405
    error = "Method not allowed, use POST."


class BadRequest(ScamCheckError):
    status_code = 400
    error = 'Missing "message" in body.'


class ServerConfigError(ScamCheckError):
    error = "Server configuration error."


class UpstreamError(ScamCheckError):
    error = "OpenAI API error."


class MalformedUpstreamResponse(ScamCheckError):
    error = "Failed to parse AI response JSON."


class IncompleteUpstreamResponse(ScamCheckError):
    error = "AI response missing required fields."


class UnexpectedServerError(ScamCheckError):
    error = "Unexpected server error."
