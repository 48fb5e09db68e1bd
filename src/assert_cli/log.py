"""Timestamped output + GitHub Actions formatting."""

import os
import sys
from datetime import datetime

from assert_cli import config


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _annotate(msg: str) -> None:
    # Workflow commands are single-line.
    first = msg.splitlines()[0] if msg else ""
    print(f"::error::{first}", flush=True)


def info(msg: str) -> None:
    if config.verbose():
        print(f"[{_timestamp()}] {msg}", flush=True)


def step(msg: str) -> None:
    info(f"  {msg}")


def success(msg: str) -> None:
    info(f"  ✓ {msg}")


def error(msg: str) -> None:
    if _is_github_actions():
        _annotate(msg)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
