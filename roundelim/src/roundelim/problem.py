"""Problem handle contract consumed by the automatic search.

The search engine treats a problem as an opaque value. It only needs to
speed it up, canonicalize the labels of the sped-up problem, count its
labels, and turn it into a printable result for the caller. Every
operation returns a new handle; a handle captured in a path is never
mutated afterwards.
"""

from typing import Any, Protocol


class ProblemHandle(Protocol):
    """One version of the combinatorial problem being transformed."""

    def speedup(self) -> "ProblemHandle":
        """Return the problem that is solvable one round faster."""

    def assign_chars(self) -> "ProblemHandle":
        """Return the same problem with canonical label names.

        Applied to the output of :meth:`speedup` before it is recorded in a
        path, since speedup produces labels that are sets of old labels.
        """

    def num_labels(self) -> int:
        """Return the number of labels used by the problem."""

    def as_result(self) -> Any:
        """Return the caller-presentable form of the problem."""
