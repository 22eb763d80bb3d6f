# path: activitybot/infra/exceptions.py
"""
Exceptions - Custom exception classes for the host application.

The dispatch core defines none of its own; handler errors propagate as-is.
"""

from typing import Optional, Dict, Any


class ActivityBotError(Exception):
    """
    Base exception for all host-side errors.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(ActivityBotError):
    """
    Raised when there is a configuration problem.
    """

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None
    ):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details={"missing_keys": missing_keys or []}
        )


class StartupError(ActivityBotError):
    """
    Raised when the application fails to start.
    """

    def __init__(self, message: str, component: Optional[str] = None):
        super().__init__(
            message=message,
            code="STARTUP_ERROR",
            details={"component": component}
        )


class AdapterError(ActivityBotError):
    """
    Raised when the adapter cannot deliver an outgoing activity.
    """

    def __init__(
        self,
        message: str,
        activity_type: Optional[str] = None,
        conversation_id: Optional[str] = None
    ):
        super().__init__(
            message=message,
            code="ADAPTER_ERROR",
            details={
                "activity_type": activity_type,
                "conversation_id": conversation_id
            }
        )
