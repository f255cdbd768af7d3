"""
Exception classes for the Plate Recognizer client.
Every failure reaching the caller is one of these, with the underlying
transport or HTTP error chained as its cause.
"""
from typing import Any, Optional


class PlateRecognizerError(Exception):
    """Base exception for all client errors"""
    def __init__(self, message: str, *args: Any):
        super().__init__(message, *args)
        self.message = message


class ConfigurationError(PlateRecognizerError):
    """Raised when the client cannot be built from the given configuration"""
    pass


class RequestError(PlateRecognizerError):
    """Raised when a call to the remote service fails"""
    def __init__(
        self,
        endpoint: str,
        original_error: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        message = f"Request to {endpoint} failed"
        if status_code is not None:
            message += f" with HTTP {status_code}"
        if original_error:
            message += f": {original_error}"
        super().__init__(message)
        self.endpoint = endpoint
        self.original_error = original_error
        self.status_code = status_code
        self.body = body


class RecognitionRequestError(RequestError):
    """Raised for failures of the plate-reader endpoint"""
    pass


class RecognitionTimeoutError(RecognitionRequestError, TimeoutError):
    pass


class StatisticsRequestError(RequestError):
    """Raised for failures of the statistics endpoint"""
    pass


class StatisticsTimeoutError(StatisticsRequestError, TimeoutError):
    pass
