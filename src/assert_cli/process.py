"""Subprocess wrapper — the single mock seam for all tests."""

import subprocess
from dataclasses import dataclass


@dataclass
class Result:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def code(self) -> int | None:
        """Exit code, or None if the process was killed by a signal."""
        return self.returncode if self.returncode >= 0 else None

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run(args: list[str], cwd: str | None = None) -> Result:
    """Run a command to completion and capture raw output.

    Raises OSError if the process cannot be started.
    """
    proc = subprocess.run(
        args,
        capture_output=True,
        stdin=subprocess.DEVNULL,
        cwd=cwd,
    )
    return Result(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def decode(data: bytes) -> str:
    """Decode captured output as UTF-8, substituting invalid sequences."""
    return data.decode("utf-8", errors="replace")
