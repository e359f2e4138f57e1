"""LLM-backed password security assessment against a local Ollama server."""

from .assessor import assess_password
from .config import DEFAULTS, AssessmentOptions, merge_options, options_from_env
from .errors import InferenceError, InvalidInputError, PasswordCheckError
from .parser import AssessmentResult

__all__ = [
    "assess_password",
    "AssessmentOptions",
    "AssessmentResult",
    "DEFAULTS",
    "merge_options",
    "options_from_env",
    "PasswordCheckError",
    "InvalidInputError",
    "InferenceError",
]
