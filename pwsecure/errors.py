"""
pwsecure.errors

Exceptions raised by the password assessor:
- InvalidInputError: the password argument (or an option) is unusable
- InferenceError: the inference server could not be reached or answered badly
"""

from typing import Optional


class PasswordCheckError(Exception):
    """Base class for all pwsecure errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class InvalidInputError(PasswordCheckError, ValueError):
    """Raised before any network activity when the input cannot be assessed."""


class InferenceError(PasswordCheckError):
    """Raised when the request to the inference server fails or times out."""
