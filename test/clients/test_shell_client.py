import pytest
import subprocess
from e2e_support.clients.shell_client import CommandError, ShellClient

class DummyResult:
    def __init__(self, returncode, stdout=None):
        self.returncode = returncode
        self.stdout = stdout

@pytest.fixture
def client():
    return ShellClient()

def test_exec_runs_through_bash(monkeypatch, client):
    calls = []
    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return DummyResult(0)
    monkeypatch.setattr(subprocess, "run", fake_run)

    assert client.exec("aws ecr get-login-password") == ""
    cmd, kwargs = calls[0]
    assert cmd == ["bash", "-o", "pipefail", "-c", "aws ecr get-login-password"]
    assert kwargs["stdout"] is None
    assert kwargs["check"] is False


def test_exec_captures_stdout(monkeypatch, client):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyResult(0, stdout="hello\n"))
    assert client.exec("echo hello", capture_output=True) == "hello\n"


def test_exec_failure(monkeypatch, client):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyResult(255))
    with pytest.raises(CommandError) as excinfo:
        client.exec("aws cloudformation delete-stack --stack-name e2e")
    assert excinfo.value.returncode == 255
    assert excinfo.value.command == "aws cloudformation delete-stack --stack-name e2e"
