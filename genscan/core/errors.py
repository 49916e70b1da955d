"""
Detection error hierarchy.

Every failure that aborts a detection derives from DetectionError and carries
the HTTP status the API layer answers with. Nothing here is retried.
"""

from typing import Optional


class DetectionError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(DetectionError):
    """Provider credentials are missing. Raised before any network call."""
    status_code = 500


class ProviderError(DetectionError):
    """Non-200 response or an explicit failure payload from a provider."""
    status_code = 502

    def __init__(self, provider: str, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status = status


class DetectionTimeoutError(DetectionError):
    status_code = 504


class DetectionCancelledError(DetectionError):
    status_code = 503


class UnsupportedOperationError(DetectionError):
    status_code = 501


class UnknownContentTypeError(DetectionError):
    status_code = 400


class InvalidPayloadError(DetectionError):
    status_code = 400
