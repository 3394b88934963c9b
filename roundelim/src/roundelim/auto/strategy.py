"""Search policy contract for the automatic search.

A strategy decides which simplifications are offered from the current
path, when the current path is a new best result, and when it is worth
extending further. It also knows how to apply one of its simplifications
to a problem. Lower-bound and upper-bound searches are independent
implementations of this same contract; nothing needs to inherit from
``Auto``, matching its methods is enough.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TypeVar

from roundelim.problem import ProblemHandle

if TYPE_CHECKING:
    from roundelim.auto.sequence import Sequence

S = TypeVar("S")


class Auto(Protocol[S]):
    """Pluggable policy driving :class:`~roundelim.auto.engine.AutomaticSimplifications`.

    ``S`` is the type of the simplification values offered by the
    strategy. The engine never inspects them; it only stores them in
    ``SIMPLIFY`` steps and passes them back to :meth:`simplify`, so they
    should be immutable and support equality.

    For a fixed path, best path and budget every method must give the same
    answer when called twice.
    """

    def simplifications(self, sequence: "Sequence", maxlabels: int) -> Iterable[S]:
        """Return the simplifications that may be applied to the current problem.

        The result is consumed lazily, one candidate per explored branch.
        Between two candidates the path is restored to what it was when
        this method was called.

        Args:
            sequence: The live path. Must not be modified.
            maxlabels: Label count the search tries to get below.

        Returns:
            Finite iterable of simplification values, explored in order.
        """

    def should_yield(self, sequence: "Sequence", best: "Sequence", maxiter: int) -> bool:
        """Return True if ``sequence`` is strictly better than ``best``.

        Args:
            sequence: The live path.
            best: The most recently reported path.
            maxiter: Maximum number of speedup steps.
        """

    def should_continue(self, sequence: "Sequence", best: "Sequence", maxiter: int) -> bool:
        """Return True if extending ``sequence`` could still beat ``best``.

        Returning False prunes the whole subtree below the current path.

        Args:
            sequence: The live path.
            best: The most recently reported path.
            maxiter: Maximum number of speedup steps.
        """

    def simplify(self, problem: ProblemHandle, simplification: S) -> ProblemHandle:
        """Return a new problem with ``simplification`` applied to ``problem``."""
