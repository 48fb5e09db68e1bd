"""Command assertion builder + execution engine."""

import os
import shlex
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

import pytest

from assert_cli import config, log, process
from assert_cli.errors import (
    AssertCliError,
    CommandNotRunnable,
    ExitCodeMismatch,
    StatusMismatch,
)
from assert_cli.output import OutputAssertion, OutputAssertionBuilder, OutputKind


@dataclass(frozen=True)
class Outcome:
    """Result of Assert.execute(): success, or exactly one failure."""

    error: AssertCliError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def _default_cmd() -> tuple[str, ...]:
    return tuple(config.main_command())


def _argv(args: Iterable[str | os.PathLike]) -> tuple[str, ...]:
    """Validate an argument list; a bare string is not one."""
    if isinstance(args, (str, bytes)):
        raise TypeError(f"expected a list of arguments, got {type(args).__name__} {args!r}")
    argv = []
    for arg in args:
        if isinstance(arg, os.PathLike):
            arg = os.fspath(arg)
        if not isinstance(arg, str):
            raise TypeError(
                f"command arguments must be str or PathLike, got {type(arg).__name__} {arg!r}"
            )
        argv.append(arg)
    return tuple(argv)


@dataclass(frozen=True)
class Assert:
    """Assertions for a single command invocation.

    Every builder method returns a new Assert; the receiver is left
    untouched. Defaults to asserting successful execution.

        Assert.command(["echo", "42"]).stdout().contains("42").unwrap()
    """

    cmd: tuple[str, ...] = field(default_factory=_default_cmd)
    current_dir: str | None = None
    expect_success: bool | None = True
    expect_exit_code: int | None = None
    expect_output: tuple[OutputAssertion, ...] = ()

    def __post_init__(self):
        cmd = _argv(self.cmd)
        if not cmd:
            raise ValueError("command must not be empty")
        object.__setattr__(self, "cmd", cmd)
        object.__setattr__(self, "expect_output", tuple(self.expect_output))

    @classmethod
    def main_binary(cls) -> "Assert":
        """Run the project's primary binary (see config.main_command)."""
        return cls()

    @classmethod
    def cargo_binary(cls, name: str) -> "Assert":
        """Run a specific binary of the current cargo project."""
        return cls(cmd=config.cargo_command(name))

    @classmethod
    def python_module(cls, name: str) -> "Assert":
        """Run `python -m name` with the current interpreter."""
        return cls(cmd=[sys.executable, "-m", name])

    @classmethod
    def command(cls, cmd: Iterable[str]) -> "Assert":
        """Run a custom command given as a list of arguments."""
        return cls(cmd=_argv(cmd))

    def with_args(self, args: Iterable[str]) -> "Assert":
        """Append a list of arguments to the command."""
        return replace(self, cmd=self.cmd + _argv(args))

    def with_current_dir(self, path: str | os.PathLike) -> "Assert":
        """Run the command in path instead of the caller's working directory."""
        return replace(self, current_dir=os.fspath(path))

    def and_(self) -> "Assert":
        """No-op to make chains read better."""
        return self

    # Status expectations always change as a pair:
    #
    #   succeeds()      success=True   exit_code=None
    #   fails()         success=False  exit_code=unchanged
    #   fails_with(n)   success=False  exit_code=n
    _UNCHANGED = object()

    def _with_status(self, success: bool, exit_code=_UNCHANGED) -> "Assert":
        if exit_code is Assert._UNCHANGED:
            exit_code = self.expect_exit_code
        return replace(self, expect_success=success, expect_exit_code=exit_code)

    def succeeds(self) -> "Assert":
        """Expect the command to exit successfully. Clears any expected exit code."""
        return self._with_status(True, exit_code=None)

    def fails(self) -> "Assert":
        """Expect the command to run and fail.

        A command that cannot be started at all is reported as
        CommandNotRunnable, not as a failure that satisfies this.
        """
        return self._with_status(False)

    def fails_with(self, expect_exit_code: int) -> "Assert":
        """Expect the command to fail with exactly this exit code."""
        return self._with_status(False, exit_code=int(expect_exit_code))

    def stdout(self) -> OutputAssertionBuilder:
        """Start a predicate on the captured stdout."""
        return OutputAssertionBuilder(self, OutputKind.STDOUT)

    def stderr(self) -> OutputAssertionBuilder:
        """Start a predicate on the captured stderr."""
        return OutputAssertionBuilder(self, OutputKind.STDERR)

    def _with_output(self, assertion: OutputAssertion) -> "Assert":
        return replace(self, expect_output=self.expect_output + (assertion,))

    def execute(self) -> Outcome:
        """Run the command and check all expectations.

        Checks run in order: exit status, exit code, then output predicates
        in the order they were added. The first failing check is returned.
        """
        argv = list(self.cmd)
        where = f" in {self.current_dir}" if self.current_dir else ""
        log.step(f"running `{shlex.join(argv)}`{where}")

        try:
            result = process.run(argv, cwd=self.current_dir)
        except (OSError, ValueError) as e:
            # ValueError: argv or cwd the OS cannot accept, e.g. an embedded NUL.
            return self._fail(CommandNotRunnable(argv, e))

        if result.code is None:
            log.step("terminated by signal")
        else:
            log.step(f"exited with code {result.code}")

        if self.expect_success is not None and self.expect_success != result.success:
            return self._fail(
                StatusMismatch(
                    argv,
                    self.expect_success,
                    process.decode(result.stdout),
                    process.decode(result.stderr),
                )
            )

        if self.expect_exit_code is not None and self.expect_exit_code != result.code:
            return self._fail(
                ExitCodeMismatch(
                    argv,
                    self.expect_exit_code,
                    result.code,
                    process.decode(result.stdout),
                    process.decode(result.stderr),
                )
            )

        for assertion in self.expect_output:
            error = assertion.check(result, argv)
            if error is not None:
                return self._fail(error)

        log.success(f"`{shlex.join(argv)}` passed")
        return Outcome()

    def _fail(self, error: AssertCliError) -> Outcome:
        log.step(f"{type(error).__name__}: {error}")
        return Outcome(error=error)

    def unwrap(self) -> None:
        """Run the command and fail the current test if any check fails."""
        outcome = self.execute()
        if outcome.error is not None:
            log.error(str(outcome.error))
            pytest.fail(str(outcome.error), pytrace=False)
