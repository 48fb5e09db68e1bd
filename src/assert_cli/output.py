"""Output predicates and the builder that attaches them to an Assert."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from assert_cli import process
from assert_cli.errors import OutputMismatch

if TYPE_CHECKING:
    from assert_cli.command import Assert


class OutputKind(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"

    def select(self, result: process.Result) -> bytes:
        return result.stdout if self is OutputKind.STDOUT else result.stderr


@dataclass(frozen=True)
class OutputAssertion:
    """A single check against one captured stream.

    fuzzy selects substring containment instead of exact equality.
    expected_result is the truth value the raw comparison must have, so a
    negated predicate is the same check with expected_result=False.
    """

    expect: str
    fuzzy: bool
    expected_result: bool
    kind: OutputKind

    def matches(self, text: str) -> bool:
        if self.fuzzy:
            outcome = self.expect in text
        else:
            outcome = text == self.expect
        return outcome == self.expected_result

    def check(self, result: process.Result, argv: list[str]) -> OutputMismatch | None:
        """Return an OutputMismatch if the predicate fails against result."""
        text = process.decode(self.kind.select(result))
        if self.matches(text):
            return None
        return OutputMismatch(
            argv,
            self.kind,
            self.expect,
            self.fuzzy,
            self.expected_result,
            process.decode(result.stdout),
            process.decode(result.stderr),
        )


@dataclass(frozen=True)
class OutputAssertionBuilder:
    """Fluent helper returned by Assert.stdout() / Assert.stderr().

    Every finalizer returns the parent Assert with one predicate appended.
    """

    assertion: "Assert"
    kind: OutputKind
    expected_result: bool = True

    def not_(self) -> "OutputAssertionBuilder":
        """Negate the predicate built by the next finalizer."""
        return replace(self, expected_result=not self.expected_result)

    def contains(self, output: str) -> "Assert":
        """Expect the stream to contain output."""
        return self._finish(output, fuzzy=True)

    def is_(self, output: str) -> "Assert":
        """Expect the stream to be exactly output. Trailing newlines count."""
        return self._finish(output, fuzzy=False)

    def doesnt_contain(self, output: str) -> "Assert":
        """Expect the stream not to contain output."""
        return self.not_().contains(output)

    def isnt(self, output: str) -> "Assert":
        """Expect the stream not to be exactly output."""
        return self.not_().is_(output)

    def _finish(self, output: str, fuzzy: bool) -> "Assert":
        return self.assertion._with_output(
            OutputAssertion(
                expect=str(output),
                fuzzy=fuzzy,
                expected_result=self.expected_result,
                kind=self.kind,
            )
        )
