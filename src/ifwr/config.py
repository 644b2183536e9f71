"""Finalized run configuration."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Configuration:
    command: tuple[str, ...]
    fail_on_stdout_write: bool = False
    fail_on_stderr_write: bool = False

    def __post_init__(self):
        if not self.command:
            raise ValueError("No command given")
        object.__setattr__(self, "command", tuple(self.command))
        # Watching stderr is the default policy
        if not self.fail_on_stdout_write and not self.fail_on_stderr_write:
            object.__setattr__(self, "fail_on_stderr_write", True)

    @classmethod
    def from_flags(
        cls, track_stdout: bool, track_stderr: bool, command: Sequence[str]
    ) -> "Configuration":
        """Build a configuration from the -1/-2 flags and the command line.

        Raises ValueError if command is empty.
        """
        return cls(
            command=tuple(command),
            fail_on_stdout_write=track_stdout,
            fail_on_stderr_write=track_stderr,
        )
