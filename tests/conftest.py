"""Shared test fixtures."""

import pytest


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run for tests.

    Queue process.Result objects (or OSError instances to raise) on
    ``responses``; calls are recorded as (args, cwd).
    """
    from assert_cli import process

    calls = []
    responses = []

    def fake_run(args, cwd=None):
        calls.append((args, cwd))
        if responses:
            response = responses.pop(0)
            if isinstance(response, OSError):
                raise response
            return response
        return process.Result(returncode=0, stdout=b"", stderr=b"")

    monkeypatch.setattr(process, "run", fake_run)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("ASSERT_CLI_COMMAND", raising=False)
    monkeypatch.delenv("ASSERT_CLI_VERBOSE", raising=False)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
