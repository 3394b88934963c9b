"""Shared test utilities and fixtures for pytest.

Provides a toy problem whose only state is a label count, and small
strategies exercising the different shapes of search trees.
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace

import matplotlib
import pytest

from roundelim.auto import SIMPLIFY, AutomaticSimplifications, Sequence

matplotlib.use("Agg")


@dataclass(frozen=True)
class ToyProblem:
    """Problem handle whose labels double on speedup.

    Attributes:
        labels: Number of labels.
        rounds: Number of speedups performed to reach this problem.
        named: Whether ``assign_chars`` was applied.
    """

    labels: int
    rounds: int = 0
    named: bool = False

    def speedup(self) -> "ToyProblem":
        """Double the labels, as if every label became a set of labels."""
        return ToyProblem(self.labels * 2, self.rounds + 1)

    def assign_chars(self) -> "ToyProblem":
        """Mark the labels as renamed."""
        return replace(self, named=True)

    def num_labels(self) -> int:
        """Return the label count."""
        return self.labels

    def as_result(self) -> str:
        """Return a printable summary."""
        return f"{self.labels} labels after {self.rounds} speedups"

    def reduce(self, amount: int) -> "ToyProblem":
        """Remove ``amount`` labels."""
        return replace(self, labels=self.labels - amount)


class DeepestSpeedup:
    """Reports a path whenever it holds more speedups than the best one.

    Simplifications remove ``c`` labels for every ``c`` in ``candidates``
    smaller than the current label count, so label counts stay positive
    and strictly decrease along simplification chains.
    """

    def __init__(self, candidates: tuple[int, ...] = (1, 2)) -> None:
        self.candidates = candidates
        self.simplify_calls = 0

    def simplifications(self, sequence: Sequence, maxlabels: int) -> Iterator[int]:
        labels = sequence.current().num_labels()
        return (c for c in self.candidates if c < labels)

    def should_yield(self, sequence: Sequence, best: Sequence, maxiter: int) -> bool:
        return sequence.speedups > best.speedups

    def should_continue(self, sequence: Sequence, best: Sequence, maxiter: int) -> bool:
        return sequence.speedups < maxiter

    def simplify(self, problem: ToyProblem, simplification: int) -> ToyProblem:
        self.simplify_calls += 1
        return problem.reduce(simplification)


class ExactSpeedups(DeepestSpeedup):
    """Reports only paths holding exactly ``target`` speedups."""

    def __init__(self, target: int) -> None:
        super().__init__()
        self.target = target

    def should_yield(self, sequence: Sequence, best: Sequence, maxiter: int) -> bool:
        return sequence.speedups == self.target


class JustSimplified(DeepestSpeedup):
    """Reports every path ending with a simplification after one speedup."""

    def should_yield(self, sequence: Sequence, best: Sequence, maxiter: int) -> bool:
        return sequence.speedups == 1 and sequence[-1].kind == SIMPLIFY


class TargetPath(DeepestSpeedup):
    """Reports only the path whose step kinds and simplifications match ``target``."""

    def __init__(self, target: tuple[tuple[str, object], ...]) -> None:
        super().__init__()
        self.target = target

    def should_yield(self, sequence: Sequence, best: Sequence, maxiter: int) -> bool:
        return tuple((step.kind, step.simplification) for step in sequence) == self.target


class SymmetryChecker(DeepestSpeedup):
    """Checks that the live path is restored after every explored candidate.

    The candidate generator captures the path when it starts and compares
    it each time it is resumed, which happens right after the previous
    candidate's subtree has been explored and popped.

    Attributes:
        checks: Number of comparisons performed.
        violations: Paths that differed from the captured one.
    """

    def __init__(self) -> None:
        super().__init__()
        self.checks = 0
        self.violations: list[tuple[Sequence, Sequence]] = []

    def simplifications(self, sequence: Sequence, maxlabels: int) -> Iterator[int]:
        before = sequence.copy()
        for candidate in super().simplifications(sequence, maxlabels):
            yield candidate
            self.checks += 1
            if sequence != before:
                self.violations.append((before, sequence.copy()))


def run_recursive(auto: AutomaticSimplifications) -> list[Sequence]:
    """Collect every improvement through the callback form of the search.

    Args:
        auto: Freshly constructed search.

    Returns:
        Improvements in discovery order.
    """
    found: list[Sequence] = []
    auto.run(found.append)
    return found


def run_iterator(auto: AutomaticSimplifications) -> list[Sequence]:
    """Collect every improvement by exhausting the lazy iterator.

    Args:
        auto: Freshly constructed search.

    Returns:
        Improvements in discovery order.
    """
    return list(auto)


@pytest.fixture
def toy_problem() -> ToyProblem:
    """Fixture providing a two-label toy problem."""
    return ToyProblem(2)
