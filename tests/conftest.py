"""Shared test fixtures."""

import pytest


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.spawn for tests.

    Chunks queued on `stdout`/`stderr` are written through the trackers
    before `outcome` is returned, as a real child would.
    """
    from ifwr import process

    mock = type(
        "MockProcess",
        (),
        {"calls": [], "stdout": [], "stderr": [], "outcome": process.Completed(exit_status=0)},
    )()

    def fake_spawn(args, stdin=None, stdout=None, stderr=None):
        mock.calls.append(("spawn", args, stdin))
        for chunk in mock.stdout:
            stdout.write(chunk)
        for chunk in mock.stderr:
            stderr.write(chunk)
        return mock.outcome

    monkeypatch.setattr(process, "spawn", fake_spawn)

    return mock
