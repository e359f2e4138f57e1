"""
pwsecure.assessor

assess_password(password, options): ask the inference server to rate a
password and return an AssessmentResult.
"""

import logging

from .client import generate
from .config import OptionsLike, merge_options
from .parser import AssessmentResult, parse_result
from .prompts import build_prompts

logger = logging.getLogger(__name__)


async def assess_password(password: str, options: OptionsLike = None) -> AssessmentResult:
    """
    Rate a password with the configured model.

    Input is validated before any network activity (InvalidInputError).
    Transport problems raise InferenceError. An unparseable model reply never
    raises; it yields an approximate result instead.
    """
    system_prompt, user_prompt = build_prompts(password)
    config = merge_options(options)
    text = await generate(system_prompt, user_prompt, config)
    result = parse_result(text)
    logger.debug(f"Assessment: score={result.score} rating={result.rating!r}")
    return result
