"""
Errors raised while producing a lesson.

Every error carries the HTTP status the API answers with; the handlers in
``main`` render them as ``{"error": message}``.
"""
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class LessonServiceError(Exception):
    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MethodNotAllowed(LessonServiceError):
    status_code = HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, method: str):
        super().__init__("Method not allowed")
        self.method = method


class MissingParameter(LessonServiceError):
    status_code = HTTP_400_BAD_REQUEST


class RemoteCallFailed(LessonServiceError):
    """An upstream OpenAI call answered with a non-success status."""

    def __init__(self, endpoint: str, body: str):
        super().__init__(f"Failed to {endpoint}: {body}")
        self.endpoint = endpoint
        self.body = body


class MalformedAssistantReply(LessonServiceError):
    pass


class InvalidJSONPayload(LessonServiceError):
    def __init__(self, raw_error: str):
        super().__init__(f"Failed to parse OpenAI response as JSON: {raw_error}")
        self.raw_error = raw_error


class RunFailed(LessonServiceError):
    def __init__(self, status: str):
        super().__init__(f"Run failed with status: {status}")
        self.status = status


class ConfigurationError(LessonServiceError):
    pass
