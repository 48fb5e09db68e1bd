"""Failure kinds reported by Assert.execute()."""

import shlex
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assert_cli.output import OutputKind


def _format_argv(argv: Sequence[str]) -> str:
    return shlex.join(argv)


def _format_output(stdout: str, stderr: str) -> str:
    return f"stdout=```{stdout}```\nstderr=```{stderr}```"


class AssertCliError(Exception):
    """Base class for all assertion failures.

    Every failure carries the argv that was run. Mismatch kinds also carry
    both captured streams, decoded lossily as UTF-8.
    """

    def __init__(self, argv: Sequence[str], message: str):
        self.argv = list(argv)
        super().__init__(message)


class CommandNotRunnable(AssertCliError):
    """The process could not be started at all."""

    def __init__(self, argv: Sequence[str], error: OSError | ValueError):
        self.error = error
        super().__init__(
            argv,
            f"Failed to run command `{_format_argv(argv)}`: {error}",
        )


class StatusMismatch(AssertCliError):
    """The process succeeded when it should have failed, or vice versa."""

    def __init__(self, argv: Sequence[str], expected_success: bool, stdout: str, stderr: str):
        self.expected_success = expected_success
        self.stdout = stdout
        self.stderr = stderr
        actual = "failed" if expected_success else "succeeded"
        expected = "succeed" if expected_success else "fail"
        super().__init__(
            argv,
            f"Command `{_format_argv(argv)}` {actual} but expected it to {expected}\n"
            + _format_output(stdout, stderr),
        )


class ExitCodeMismatch(AssertCliError):
    """The process exited with a different code than expected."""

    def __init__(
        self,
        argv: Sequence[str],
        expected_code: int | None,
        actual_code: int | None,
        stdout: str,
        stderr: str,
    ):
        self.expected_code = expected_code
        self.actual_code = actual_code
        self.stdout = stdout
        self.stderr = stderr
        actual = "no exit code" if actual_code is None else f"exit code {actual_code}"
        super().__init__(
            argv,
            f"Command `{_format_argv(argv)}` terminated with {actual} "
            f"but expected exit code {expected_code}\n" + _format_output(stdout, stderr),
        )


class OutputMismatch(AssertCliError):
    """A stdout/stderr predicate did not hold."""

    def __init__(
        self,
        argv: Sequence[str],
        kind: "OutputKind",
        expect: str,
        fuzzy: bool,
        expected_result: bool,
        stdout: str,
        stderr: str,
    ):
        self.kind = kind
        self.expect = expect
        self.fuzzy = fuzzy
        self.expected_result = expected_result
        self.stdout = stdout
        self.stderr = stderr
        relation = "contain" if fuzzy else "be exactly"
        if not expected_result:
            relation = f"not {relation}"
        super().__init__(
            argv,
            f"Unexpected {kind.value} of command `{_format_argv(argv)}`: "
            f"expected it to {relation} {expect!r}\n" + _format_output(stdout, stderr),
        )
