try:
    from importlib.metadata import version

    __version__ = version("assert-cli")
except Exception:
    __version__ = "0.0.0"

from assert_cli.command import Assert, Outcome
from assert_cli.errors import (
    AssertCliError,
    CommandNotRunnable,
    ExitCodeMismatch,
    OutputMismatch,
    StatusMismatch,
)
from assert_cli.output import OutputAssertion, OutputAssertionBuilder, OutputKind

__all__ = [
    "Assert",
    "AssertCliError",
    "CommandNotRunnable",
    "ExitCodeMismatch",
    "Outcome",
    "OutputAssertion",
    "OutputAssertionBuilder",
    "OutputKind",
    "OutputMismatch",
    "StatusMismatch",
]
