# envkit/errors.py
"""
Error types raised by the environment accessors.

Two failures can be surfaced to callers:
- EnvNotSetError: the variable has no value in the environment
- EnvParseError: the value exists but cannot be converted

Both derive from EnvError and also from the matching builtin
(KeyError / ValueError) so callers can catch either family.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"


class EnvError(Exception):
    """Base exception for environment access errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.CONFIGURATION,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        key: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.category = category
        self.severity = severity
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "key": self.key,
        }


class EnvNotSetError(EnvError, KeyError):
    """The requested variable is not present in the environment."""

    def __init__(self, key: str):
        super().__init__(
            f"Environment variable `{key}` is not set",
            user_message=f"Please set the {key} environment variable.",
            category=ErrorCategory.CONFIGURATION,
            key=key,
        )


class EnvParseError(EnvError, ValueError):
    """The variable is present but its value cannot be converted."""

    def __init__(self, key: str, value: str):
        super().__init__(
            f"Failed to parse environment variable `{key}`: {value}",
            user_message=f"The {key} environment variable has an invalid value.",
            category=ErrorCategory.VALIDATION,
            key=key,
        )
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["value"] = self.value
        return data
