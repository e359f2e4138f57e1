# pwsecure/config.py
"""
Option handling for the assessor.
Defaults live in DEFAULTS; callers override any subset of them per call.
options_from_env() is for callers (the CLI) that want OLLAMA_* variables honored.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .errors import InvalidInputError

DEFAULTS: Dict[str, Any] = {
    "inference_url": "http://localhost:11434",
    "model": "llama2",
    "timeout_ms": 10000,
}

# environment variable -> option name
ENV_VARS = {
    "OLLAMA_URL": "inference_url",
    "OLLAMA_MODEL": "model",
    "OLLAMA_TIMEOUT_MS": "timeout_ms",
}


@dataclass(frozen=True)
class AssessmentOptions:
    inference_url: str = DEFAULTS["inference_url"]
    model: str = DEFAULTS["model"]
    timeout_ms: int = DEFAULTS["timeout_ms"]

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def generate_url(self) -> str:
        return self.inference_url.rstrip("/") + "/api/generate"


OptionsLike = Union[AssessmentOptions, Mapping[str, Any], None]


def _check_url(value: str) -> None:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise InvalidInputError(f"inference_url is not a valid URL: {e}", cause=e) from e
    if url.port is not None and not 0 < url.port < 65536:
        raise InvalidInputError(f"inference_url port out of range: {url.port}")


def merge_options(options: OptionsLike = None) -> AssessmentOptions:
    """
    Merge caller options over DEFAULTS and return a validated AssessmentOptions.

    Accepts an AssessmentOptions, a (possibly partial) mapping of option names,
    or None. Keys whose value is None are treated as "not supplied".
    """
    if options is None:
        merged = AssessmentOptions()
    elif isinstance(options, AssessmentOptions):
        merged = options
    else:
        known = {f.name for f in fields(AssessmentOptions)}
        unknown = set(options) - known
        if unknown:
            raise InvalidInputError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        overrides = {k: v for k, v in options.items() if v is not None}
        merged = replace(AssessmentOptions(), **overrides)

    if isinstance(merged.timeout_ms, bool) or not isinstance(merged.timeout_ms, int) or merged.timeout_ms <= 0:
        raise InvalidInputError("timeout_ms must be a positive integer")
    if not merged.inference_url or not isinstance(merged.inference_url, str):
        raise InvalidInputError("inference_url must be a non-empty string")
    _check_url(merged.inference_url)
    if not merged.model or not isinstance(merged.model, str):
        raise InvalidInputError("model must be a non-empty string")
    return merged


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read OLLAMA_URL / OLLAMA_MODEL / OLLAMA_TIMEOUT_MS into an options mapping.
    Unset or empty variables are skipped; a non-numeric timeout is ignored.
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for var, name in ENV_VARS.items():
        value = env.get(var)
        if not value:
            continue
        if name == "timeout_ms":
            try:
                out[name] = int(value)
            except ValueError:
                continue
        else:
            out[name] = value
    return out
