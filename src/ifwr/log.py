"""Diagnostic output + GitHub Actions formatting."""

import os
import sys
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def error(msg: str) -> None:
    """Write one diagnostic line to stderr."""
    if _is_github_actions():
        print(f"::error::{msg}", file=sys.stderr, flush=True)
        return
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
