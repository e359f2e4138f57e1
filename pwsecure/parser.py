"""
pwsecure.parser

Interpret the model's reply as an AssessmentResult, in three tiers:
1. the whole reply is a JSON object with the expected fields
2. the first balanced {...} block inside the reply is such an object
3. keyword heuristics over the raw text (logged as a warning)

JSON results are trusted as reported; nothing is clamped or re-derived.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

EXPECTED_FIELDS = ("score", "rating", "feedback", "isSecure")

# (substring, score, rating), checked in this order against the lowercased reply.
# "weak" precedes "very weak", so the last rule never fires: a reply saying
# "very weak" is rated 30/"weak". Kept as is; changing it changes results.
HEURISTIC_RULES = (
    ("very strong", 85, "very strong"),
    ("strong", 70, "strong"),
    ("moderate", 50, "moderate"),
    ("weak", 30, "weak"),
    ("very weak", 15, "very weak"),
)

DEFAULT_SCORE = 40
DEFAULT_RATING = "moderate"

FALLBACK_FEEDBACK = (
    "Couldn't get precise results. Consider using a password with at least 12 characters, "
    "containing a mix of lowercase and uppercase letters, numbers, and special characters."
)


@dataclass(frozen=True)
class AssessmentResult:
    score: int
    rating: str
    feedback: str
    is_secure: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssessmentResult":
        return cls(
            score=data["score"],
            rating=data["rating"],
            feedback=data["feedback"],
            is_secure=data["isSecure"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "rating": self.rating,
            "feedback": self.feedback,
            "isSecure": self.is_secure,
        }


def _decode_result(text: str) -> Optional[AssessmentResult]:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # RecursionError: pathologically nested text
        return None
    if not isinstance(data, dict) or not all(k in data for k in EXPECTED_FIELDS):
        return None
    return AssessmentResult.from_dict(data)


def find_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced {...} block in text, or None.
    Braces inside JSON string literals are ignored.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        c = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
            continue
        if c == '"':
            in_string = True
        elif c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def _match_rule(text: str):
    lower = text.lower()
    for pattern, score, rating in HEURISTIC_RULES:
        if pattern in lower:
            return score, rating
    return None


def estimate_score(text: str) -> int:
    match = _match_rule(text)
    return match[0] if match else DEFAULT_SCORE


def estimate_rating(text: str) -> str:
    match = _match_rule(text)
    return match[1] if match else DEFAULT_RATING


def estimate_result(text: str) -> AssessmentResult:
    """Keyword-based result for replies that carry no usable JSON."""
    return AssessmentResult(
        score=estimate_score(text),
        rating=estimate_rating(text),
        feedback=FALLBACK_FEEDBACK,
        # independent of the estimated score
        is_secure="strong" in text.lower(),
    )


def parse_result(text: str) -> AssessmentResult:
    """Never raises; falls through the tiers until one yields a result."""
    result = _decode_result(text)
    if result is not None:
        return result

    block = find_json_object(text)
    if block is not None:
        result = _decode_result(block)
        if result is not None:
            logger.debug("Extracted JSON object embedded in model reply")
            return result

    logger.warning("Failed to get response in JSON format, returning approximate results")
    return estimate_result(text)
