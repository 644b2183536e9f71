"""Run one child under write tracking and derive the exit code."""

import sys
from collections.abc import Iterable
from typing import BinaryIO

from ifwr import log, process
from ifwr.config import Configuration
from ifwr.forwarder import WriteTracker

FAIL = 255
UNKNOWN = 254


def exit_code(outcome: process.RunOutcome, trackers: Iterable[WriteTracker]) -> int:
    """Map a run outcome to the process exit code.

    Precedence: spawn/wait failure (254), child's non-zero status,
    watched-stream write (255), then 0.
    """
    if isinstance(outcome, process.SpawnOrWaitFailure):
        log.error(outcome.reason)
        return UNKNOWN
    if outcome.exit_status != 0:
        return outcome.exit_status
    if any(t.failed() for t in trackers):
        return FAIL
    return 0


def run(
    config: Configuration,
    stdin: BinaryIO | int | None = None,
    stdout: BinaryIO | None = None,
    stderr: BinaryIO | None = None,
) -> int:
    """Run config.command to completion. Returns exit code."""
    out = WriteTracker(
        stdout if stdout is not None else sys.stdout.buffer,
        watched=config.fail_on_stdout_write,
    )
    err = WriteTracker(
        stderr if stderr is not None else sys.stderr.buffer,
        watched=config.fail_on_stderr_write,
    )
    outcome = process.spawn(list(config.command), stdin=stdin, stdout=out, stderr=err)
    return exit_code(outcome, (out, err))
