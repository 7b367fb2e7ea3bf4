"""
Application-specific exception classes.

The gateway raises these; the lookup and conversation services absorb them
into their fallback values.
"""

import logging
from typing import Optional


class YasashiiError(Exception):
    """Base exception class for application errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(YasashiiError):
    """Raised when application configuration is missing or invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)
        self.config_key = config_key


class ExternalServiceError(YasashiiError):
    """Raised when a call to the model gateway fails."""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, error_code="EXTERNAL_SERVICE_ERROR", **kwargs)
        self.service_name = service_name
        self.status_code = status_code


class MalformedOutputError(YasashiiError):
    """Raised when model output does not have the expected shape."""

    def __init__(self, message: str, raw: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="MALFORMED_OUTPUT", **kwargs)
        # Keep only a preview; model output can be long
        self.raw = raw[:500] if raw else raw


class SessionError(YasashiiError):
    """Raised when session bookkeeping fails."""

    def __init__(self, message: str, session_id: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="SESSION_ERROR", **kwargs)
        self.session_id = session_id


def log_error(error: YasashiiError, logger=None, level: str = "error"):
    """
    Log a YasashiiError with structured information.

    Args:
        error: The error to log
        logger: Logger instance (uses this module's logger if None)
        level: Log level ("error", "warning", "info", "debug")
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    log_func = getattr(logger, level)
    log_func(
        f"{error.error_code}: {error.message}",
        extra={
            "error_code": error.error_code,
            "details": error.details,
            "context": {
                attr: getattr(error, attr, None)
                for attr in ["config_key", "service_name", "status_code", "session_id"]
                if hasattr(error, attr)
            },
        },
    )
