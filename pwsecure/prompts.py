"""
pwsecure.prompts

Builds the two instructions sent to the model:
- SYSTEM_PROMPT: fixed rubric, scoring bands and required JSON fields
- build_user_prompt(password): the per-call instruction embedding the password
"""

from typing import Tuple

from .errors import InvalidInputError

# rating vocabulary, weakest first; matches the bands in SYSTEM_PROMPT
RATINGS = ("very weak", "weak", "moderate", "strong", "very strong")

SYSTEM_PROMPT = """You are an advanced user security manager specializing in password security assessment.
Your task is to evaluate the strength of the provided password.
Assess the password against the following criteria:
1. Length (minimum 8 characters)
2. Complexity (character diversity: lowercase and uppercase letters, numbers, special characters)
3. Avoidance of common patterns (like "123456", "password", "qwerty")
4. Uniqueness (whether it's a commonly used password)

Use these criteria to rate the password on a scale from 0 to 100, where:
- 0-20: Very weak (easy to crack within seconds)
- 21-40: Weak (easy to crack within minutes)
- 41-60: Moderate (requires more time to crack)
- 61-80: Strong (difficult to crack)
- 81-100: Very strong (extremely difficult to crack)

The output should be in JSON format with the following fields:
- score: number from 0 to 100
- rating: verbal description (very weak, weak, moderate, strong, very strong)
- feedback: specific suggestions for improving password security
- isSecure: boolean indicating whether the password is considered secure (score > 60)"""


def validate_password(password) -> str:
    if not password or not isinstance(password, str):
        raise InvalidInputError("Password must be a non-empty string")
    return password


def build_user_prompt(password: str) -> str:
    validate_password(password)
    return f'Evaluate the following password for security: "{password}"'


def build_prompts(password: str) -> Tuple[str, str]:
    """Return (system_prompt, user_prompt) for one assessment."""
    return SYSTEM_PROMPT, build_user_prompt(password)
