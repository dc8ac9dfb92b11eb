from typing import Optional


class HospitalConsoleError(Exception):
    """Base class for errors surfaced to the admin as a notification."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HospitalConsoleError):
    """Draft rejected before any request was sent."""


class RequestError(HospitalConsoleError):
    """Network failure or non-OK response from the upstream API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
