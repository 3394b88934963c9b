"""Paths through the search tree.

A path starts from an initial problem; each following step either
performs one speedup or applies one simplification chosen by the active
strategy. The search engine uses a ``Sequence`` as its working stack
(steps are only ever appended to or removed from the tail) and hands out
finalized copies of it as results.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, NamedTuple

from roundelim.problem import ProblemHandle

if TYPE_CHECKING:
    from roundelim.auto.strategy import Auto

INITIAL = "initial"
SPEEDUP = "speedup"
SIMPLIFY = "simplify"


class Step(NamedTuple):
    """A single step of a path.

    Attributes:
        kind: One of ``INITIAL``, ``SPEEDUP`` or ``SIMPLIFY``.
        problem: Problem obtained after performing this step.
        simplification: Strategy value that produced a ``SIMPLIFY`` step,
            ``None`` for the other kinds.
        result: Presentable form of ``problem`` once the step has been
            finalized, else ``None``.
    """

    kind: str
    problem: ProblemHandle
    simplification: Any = None
    result: Any = None

    @classmethod
    def initial(cls, problem: ProblemHandle) -> Step:
        """Build the root step of a path."""
        return cls(INITIAL, problem)

    @classmethod
    def speedup(cls, problem: ProblemHandle) -> Step:
        """Build a step holding the result of a speedup."""
        return cls(SPEEDUP, problem)

    @classmethod
    def simplify(cls, simplification: Any, problem: ProblemHandle) -> Step:
        """Build a step holding the result of applying ``simplification``."""
        return cls(SIMPLIFY, problem, simplification)

    def finalized(self) -> Step:
        """Return a copy of this step carrying the problem's printable form."""
        return self._replace(result=self.problem.as_result())


class Sequence:
    """A chain of steps from an initial problem to the current one.

    Attributes:
        steps: Steps of the path, ``steps[0]`` is always the initial step.
        speedups: Number of ``SPEEDUP`` steps currently on the path.
    """

    def __init__(self, steps: list[Step], speedups: int) -> None:
        """Wrap an existing list of steps.

        Args:
            steps: Non-empty list of steps starting with an initial step.
            speedups: Number of speedup steps in ``steps``.

        Raises:
            ValueError: If ``steps`` does not start with an initial step.
        """
        if not steps or steps[0].kind != INITIAL:
            raise ValueError("A sequence must start with an initial step")
        self.steps = steps
        self.speedups = speedups

    @classmethod
    def start(cls, problem: ProblemHandle) -> Sequence:
        """Create a path holding only ``problem`` as its initial step."""
        return cls([Step.initial(problem)], 0)

    def current(self) -> ProblemHandle:
        """Return the problem of the last step."""
        return self.steps[-1].problem

    def push(self, step: Step) -> None:
        """Append a step to the tail of the path."""
        self.steps.append(step)

    def pop(self) -> Step:
        """Remove and return the tail step.

        Raises:
            RuntimeError: If the tail is the initial step.
        """
        if len(self.steps) == 1:
            raise RuntimeError("Cannot pop the initial step of a sequence")
        return self.steps.pop()

    def push_speedup(self) -> None:
        """Speed up the current problem and append the result."""
        problem = self.current().speedup().assign_chars()
        self.push(Step.speedup(problem))
        self.speedups += 1

    def pop_speedup(self) -> None:
        """Undo :meth:`push_speedup`.

        Raises:
            RuntimeError: If the tail step is not a speedup.
        """
        self._check_tail(SPEEDUP)
        self.pop()
        self.speedups -= 1

    def push_simplification(self, strategy: Auto, simplification: Any) -> None:
        """Apply ``simplification`` to the current problem and append the result.

        Args:
            strategy: Strategy that knows how to apply the simplification.
            simplification: One of the values offered by the strategy.
        """
        problem = strategy.simplify(self.current(), simplification)
        self.push(Step.simplify(simplification, problem))

    def pop_simplification(self) -> None:
        """Undo :meth:`push_simplification`.

        Raises:
            RuntimeError: If the tail step is not a simplification.
        """
        self._check_tail(SIMPLIFY)
        self.pop()

    def _check_tail(self, kind: str) -> None:
        tail = self.steps[-1].kind
        if tail != kind:
            raise RuntimeError(f"Expected a {kind} step at the tail, found {tail}")

    def copy(self) -> Sequence:
        """Return a copy that later pushes and pops on this path cannot alter."""
        return Sequence(list(self.steps), self.speedups)

    def snapshot(self) -> Sequence:
        """Return a copy with every step finalized for the caller."""
        return Sequence([step.finalized() for step in self.steps], self.speedups)

    def kinds(self) -> tuple[str, ...]:
        """Return the kind of every step, in order."""
        return tuple(step.kind for step in self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.speedups == other.speedups and self.steps == other.steps

    def __repr__(self) -> str:
        """Return a compact representation listing step kinds."""
        parts = []
        for step in self.steps:
            if step.kind == SIMPLIFY:
                parts.append(f"{step.kind}({step.simplification!r})")
            else:
                parts.append(step.kind)
        return f"Sequence([{', '.join(parts)}], speedups={self.speedups})"
