import json
from unittest.mock import AsyncMock

from pwsecure import cli
from pwsecure.errors import InferenceError
from pwsecure.parser import AssessmentResult

RESULT = AssessmentResult(score=82, rating="very strong", feedback="Looks good.", is_secure=True)


def test_check_json_output(mocker, capsys, monkeypatch):
    for var in ("OLLAMA_URL", "OLLAMA_MODEL", "OLLAMA_TIMEOUT_MS"):
        monkeypatch.delenv(var, raising=False)
    assess = mocker.patch("pwsecure.cli.assess_password", new=AsyncMock(return_value=RESULT))

    code = cli.main(["check", "yH7!2kLpQ@9zX", "--json"])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"score": 82, "rating": "very strong", "feedback": "Looks good.", "isSecure": True}
    assess.assert_awaited_once_with("yH7!2kLpQ@9zX", {})


def test_check_flags_override_environment(mocker, monkeypatch):
    monkeypatch.setenv("OLLAMA_URL", "http://env-host:11434")
    monkeypatch.setenv("OLLAMA_MODEL", "llama3")
    monkeypatch.delenv("OLLAMA_TIMEOUT_MS", raising=False)
    assess = mocker.patch("pwsecure.cli.assess_password", new=AsyncMock(return_value=RESULT))

    cli.main(["check", "pw", "--model", "mistral", "--timeout", "15000", "--json"])

    assess.assert_awaited_once_with("pw", {
        "inference_url": "http://env-host:11434",
        "model": "mistral",
        "timeout_ms": 15000,
    })


def test_check_panel_output(mocker, capsys):
    mocker.patch("pwsecure.cli.assess_password", new=AsyncMock(return_value=RESULT))

    code = cli.main(["check", "pw"])

    out = capsys.readouterr().out
    assert code == 0
    assert "82 / 100" in out
    assert "Looks good." in out


def test_check_error_exit_code(mocker, capsys):
    mocker.patch(
        "pwsecure.cli.assess_password",
        new=AsyncMock(side_effect=InferenceError("Failed to check password: Connection refused")),
    )

    code = cli.main(["check", "pw"])

    assert code == 1
    assert "Connection refused" in capsys.readouterr().out
