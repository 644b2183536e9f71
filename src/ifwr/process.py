"""Subprocess wrapper — the single mock seam for all tests."""

import signal
import subprocess
import threading
from dataclasses import dataclass
from typing import BinaryIO

from ifwr.forwarder import WriteTracker, pump


@dataclass(frozen=True)
class Completed:
    exit_status: int


@dataclass(frozen=True)
class SpawnOrWaitFailure:
    reason: str


RunOutcome = Completed | SpawnOrWaitFailure


def _signal_name(returncode: int) -> str:
    try:
        return signal.Signals(-returncode).name
    except ValueError:
        return f"signal {-returncode}"


def spawn(
    args: list[str],
    stdin: BinaryIO | int | None,
    stdout: WriteTracker,
    stderr: WriteTracker,
) -> RunOutcome:
    """Run a command with its output routed through trackers. Blocks until exit.

    stdin is handed to the child untouched; None inherits ours.
    """
    try:
        proc = subprocess.Popen(
            args,
            stdin=stdin,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            bufsize=0,
        )
    except OSError as e:
        return SpawnOrWaitFailure(reason=f"{args[0]}: {e.strerror or e}")
    except ValueError as e:
        # e.g. embedded null byte in an argument
        return SpawnOrWaitFailure(reason=f"{args[0]}: {e}")

    copy_errors: list[OSError] = []

    def _drain(source: BinaryIO, tracker: WriteTracker) -> None:
        try:
            pump(source, tracker)
        except OSError as e:
            copy_errors.append(e)

    threads = [
        threading.Thread(target=_drain, args=(proc.stdout, stdout), name="ifwr-stdout"),
        threading.Thread(target=_drain, args=(proc.stderr, stderr), name="ifwr-stderr"),
    ]
    for t in threads:
        t.start()

    returncode = proc.wait()
    for t in threads:
        t.join()

    if returncode < 0:
        return SpawnOrWaitFailure(reason=f"{args[0]}: terminated by {_signal_name(returncode)}")
    # A failing child outranks a failed copy
    if returncode == 0 and copy_errors:
        return SpawnOrWaitFailure(reason=f"forwarding output: {copy_errors[0]}")
    return Completed(exit_status=returncode)
