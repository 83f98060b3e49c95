"""
Error types for the Algae Biofuel Advisor.

Every error the user can trigger derives from AdvisorError. main.py
registers a single exception handler that turns these into JSON responses
of the form:

    {"detail": {"error": <code>, "title": <toast title>, "details": <message>, ...}}

The page shows `title` / `details` as a toast notification. None of these
errors are fatal: the user can correct the input and submit again.
"""

import json
from typing import Any, Dict, Optional

from fastapi import status

from algae_advisor.utils.constants import MAX_IMAGE_SIZE_MB


class AdvisorError(Exception):
    """Base class for user-facing errors."""

    error_code: str = "advisor_error"
    title: str = "Error"
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, Any]:
        """Serializable payload for the HTTP error response."""
        return {
            "error": self.error_code,
            "title": self.title,
            "details": self.message,
        }


class FieldValidationError(AdvisorError):
    """One or more form fields are out of range or unset."""

    error_code = "field_validation_error"
    title = "Validation Error"
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__("Please check the form for errors")
        self.field_errors = dict(field_errors)

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["field_errors"] = self.field_errors
        return detail


class OversizedImageError(AdvisorError):
    """Selected image exceeds the upload limit."""

    error_code = "file_too_large"
    title = "File too large"
    http_status = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def __init__(self, size_bytes: int):
        super().__init__(f"Image must be less than {MAX_IMAGE_SIZE_MB}MB")
        self.size_bytes = size_bytes


class InvalidImageTypeError(AdvisorError):
    """Uploaded file is not an image."""

    error_code = "invalid_file_type"
    title = "Invalid file type"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, content_type: Optional[str]):
        super().__init__("File must be an image (JPEG, PNG, etc.)")
        self.content_type = content_type


class MissingApiKeyError(AdvisorError):
    """Submission attempted before an API key was entered."""

    error_code = "missing_api_key"
    title = "API Key Required"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("Please enter your Gemini API Key in the settings tab")


class RemoteCallError(AdvisorError):
    """Gemini answered with a non-success HTTP status."""

    error_code = "remote_call_error"
    title = "Error Processing Request"
    http_status = status.HTTP_502_BAD_GATEWAY

    def __init__(self, status_code: int, error_body: Any):
        super().__init__(f"API error: {status_code} - {_compact(error_body)}")
        self.status_code = status_code
        self.error_body = error_body

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["status_code"] = self.status_code
        detail["upstream_error"] = self.error_body
        return detail


class MalformedResponseError(AdvisorError):
    """Gemini answered 2xx but without candidates[0].content.parts[0].text."""

    error_code = "malformed_response"
    title = "Error Processing Request"
    http_status = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str = "Unexpected API response format"):
        super().__init__(message)


class RemoteConnectionError(AdvisorError):
    """The request never got an HTTP answer (DNS, refused connection, ...)."""

    error_code = "remote_connection_error"
    title = "Error Processing Request"
    http_status = status.HTTP_502_BAD_GATEWAY


class RequestInFlightError(AdvisorError):
    """A recommendation request is already running."""

    error_code = "request_in_flight"
    title = "Request in progress"
    http_status = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("Please wait for the current analysis to finish")


def _compact(error_body: Any) -> str:
    if isinstance(error_body, str):
        return error_body
    try:
        return json.dumps(error_body, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(error_body)
