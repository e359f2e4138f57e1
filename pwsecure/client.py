import asyncio
import logging
import time

import httpx

from .config import AssessmentOptions
from .errors import InferenceError

logger = logging.getLogger(__name__)

# Low temperature for more deterministic ratings
GENERATION_OPTIONS = {"temperature": 0.1}


def build_payload(system_prompt: str, user_prompt: str, model: str) -> dict:
    return {
        "model": model,
        "prompt": user_prompt,
        "system": system_prompt,
        "format": "json",
        "stream": False,
        "options": dict(GENERATION_OPTIONS),
    }


async def generate(system_prompt: str, user_prompt: str, options: AssessmentOptions) -> str:
    """
    Send one non-streaming generate request to the inference server.

    Args:
        system_prompt: Rubric / instructions for the model.
        user_prompt: Instruction embedding the password.
        options: Merged assessment options (URL, model, timeout).

    Returns:
        The 'response' field of the server's reply, as raw text.

    Raises:
        InferenceError: network failure, non-2xx status, timeout, or a reply
            without a string 'response' field. Never retried.
    """
    url = options.generate_url
    payload = build_payload(system_prompt, user_prompt, options.model)
    timeout = options.timeout_seconds
    logger.debug(f"POST {url} (model={options.model}, timeout={timeout:.1f}s)")

    started = time.monotonic()
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as client:
            # httpx timeouts are per phase; wait_for bounds the request as a whole
            response = await asyncio.wait_for(client.post(url, json=payload), timeout)
            response.raise_for_status()
            envelope = response.json()
    except asyncio.TimeoutError as e:
        message = f"Request to {url} timed out after {options.timeout_ms}ms"
        logger.error(f"Error using inference API: {message}")
        raise InferenceError(f"Failed to check password: {message}", cause=e) from e
    except httpx.HTTPStatusError as e:
        message = f"HTTP {e.response.status_code} from {url}"
        logger.error(f"Error using inference API: {message}")
        raise InferenceError(f"Failed to check password: {message}", cause=e) from e
    except httpx.HTTPError as e:
        message = str(e) or e.__class__.__name__
        logger.error(f"Error using inference API: {message}")
        raise InferenceError(f"Failed to check password: {message}", cause=e) from e
    except ValueError as e:
        # body was not JSON
        logger.error(f"Error using inference API: invalid response body: {e}")
        raise InferenceError(f"Failed to check password: invalid response body: {e}", cause=e) from e

    if not isinstance(envelope, dict) or not isinstance(envelope.get("response"), str):
        logger.error("Error using inference API: reply has no 'response' text")
        raise InferenceError("Failed to check password: reply has no 'response' text")

    logger.info(f"Inference completed in {time.monotonic() - started:.2f}s (model={options.model})")
    return envelope["response"]
