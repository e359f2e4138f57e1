import pytest

from pwsecure.config import DEFAULTS, AssessmentOptions, merge_options, options_from_env
from pwsecure.errors import InvalidInputError


def test_defaults():
    opts = merge_options()
    assert opts == AssessmentOptions(**DEFAULTS)
    assert opts.inference_url == "http://localhost:11434"
    assert opts.model == "llama2"
    assert opts.timeout_ms == 10000
    assert opts.timeout_seconds == 10.0
    assert opts.generate_url == "http://localhost:11434/api/generate"


def test_partial_override_keeps_other_defaults():
    opts = merge_options({"model": "mistral", "timeout_ms": 15000})
    assert opts.model == "mistral"
    assert opts.timeout_ms == 15000
    assert opts.inference_url == DEFAULTS["inference_url"]


def test_none_values_mean_not_supplied():
    assert merge_options({"model": None}).model == "llama2"


def test_options_instance_used_as_is():
    opts = AssessmentOptions(inference_url="http://gpu-box:11434/", model="phi3", timeout_ms=500)
    assert merge_options(opts) is opts
    assert opts.generate_url == "http://gpu-box:11434/api/generate"


def test_unknown_option_rejected():
    with pytest.raises(InvalidInputError):
        merge_options({"ollamaUrl": "http://x"})


@pytest.mark.parametrize("timeout", [0, -5, "100", 1.5, True])
def test_bad_timeout_rejected(timeout):
    with pytest.raises(InvalidInputError):
        merge_options({"timeout_ms": timeout})


def test_options_from_env():
    env = {"OLLAMA_URL": "http://remote:11434", "OLLAMA_MODEL": "mistral", "OLLAMA_TIMEOUT_MS": "20000"}
    assert options_from_env(env) == {
        "inference_url": "http://remote:11434",
        "model": "mistral",
        "timeout_ms": 20000,
    }


def test_options_from_env_skips_empty_and_malformed():
    assert options_from_env({"OLLAMA_URL": "", "OLLAMA_TIMEOUT_MS": "soon"}) == {}


def test_options_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("OLLAMA_MODEL", "llama3")
    monkeypatch.delenv("OLLAMA_URL", raising=False)
    monkeypatch.delenv("OLLAMA_TIMEOUT_MS", raising=False)
    assert options_from_env() == {"model": "llama3"}


@pytest.mark.parametrize("url", ["http://localhost:99999", "http://localhost:0"])
def test_out_of_range_port_rejected(url):
    with pytest.raises(InvalidInputError, match="inference_url"):
        merge_options({"inference_url": url})


def test_options_instance_is_validated_too():
    with pytest.raises(InvalidInputError):
        merge_options(AssessmentOptions(inference_url="http://localhost:99999"))
