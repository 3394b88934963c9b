"""Recursive automatic simplification search.

The search explores a tree whose nodes are paths. From a node, if the
current problem has few enough labels the only child is one speedup step;
otherwise the children are the simplifications offered by the strategy,
in the order it offers them. Each visited node is first checked for
being a new best result, then expanded if the strategy thinks it is
still worth it.

Exploration is depth first on a single live path: a child is pushed on
the path before it is visited and popped right after, so the path is
restored exactly once the child's subtree has been explored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from roundelim.auto.sequence import Sequence
from roundelim.auto.strategy import Auto
from roundelim.problem import ProblemHandle

if TYPE_CHECKING:
    from roundelim.auto.iterator import AutomaticSimplificationsIterator

logger = logging.getLogger(__name__)


class AutomaticSimplifications:
    """State of one automatic search.

    The same search can be driven either by :meth:`run`, which calls back
    for every improvement, or by iterating over it, which produces the
    same improvements one at a time. A search object can be driven only
    once; starting it a second time raises ``RuntimeError``.

    Attributes:
        sol: The live path being extended.
        best: The most recently reported improvement.
        strategy: Policy deciding candidates, improvements and pruning.
        maxiter: Maximum number of speedup steps, interpreted by the strategy.
        maxlabels: Label count at or below which a speedup is performed
            instead of a simplification. ``0`` means always speed up.
    """

    def __init__(self, problem: ProblemHandle, strategy: Auto[Any], maxiter: int, maxlabels: int) -> None:
        """Start a search from ``problem``.

        Args:
            problem: Initial problem.
            strategy: Search policy.
            maxiter: Maximum number of speedup steps.
            maxlabels: Label threshold deciding between speedup and simplification.

        Raises:
            ValueError: If a budget is negative.
        """
        if maxiter < 0:
            raise ValueError(f"maxiter must be non-negative, got {maxiter}")
        if maxlabels < 0:
            raise ValueError(f"maxlabels must be non-negative, got {maxlabels}")
        self.sol = Sequence.start(problem)
        self.best = self.sol.copy()
        self.strategy = strategy
        self.maxiter = maxiter
        self.maxlabels = maxlabels
        self._driven = False

    def wants_speedup(self) -> bool:
        """Return True if the current problem should be sped up rather than simplified."""
        return self.maxlabels == 0 or self.sol.current().num_labels() <= self.maxlabels

    def check_yield(self) -> bool:
        """Record the live path as the new best if the strategy says it improves.

        Returns:
            True if ``best`` was replaced.
        """
        if not self.strategy.should_yield(self.sol, self.best, self.maxiter):
            return False
        self.best = self.sol.snapshot()
        logger.debug("Improvement: %r", self.best)
        return True

    def check_continue(self) -> bool:
        """Return True if the subtree below the live path should be explored."""
        return self.strategy.should_continue(self.sol, self.best, self.maxiter)

    def _mark_driven(self) -> None:
        if self._driven:
            raise RuntimeError("An automatic search can only be driven once")
        self._driven = True

    def run(self, callback: Callable[[Sequence], None]) -> None:
        """Explore the whole tree, calling ``callback`` for every improvement.

        Args:
            callback: Receives a copy of each new best path, in discovery order.

        Raises:
            RuntimeError: If the search was already driven.
        """
        self._mark_driven()
        self._visit(callback)

    def _visit(self, callback: Callable[[Sequence], None]) -> None:
        if self.check_yield():
            callback(self.best.copy())
        if self.check_continue():
            self._expand(callback)

    def _expand(self, callback: Callable[[Sequence], None]) -> None:
        if self.wants_speedup():
            self.sol.push_speedup()
            self._visit(callback)
            self.sol.pop_speedup()
            return
        for simplification in self.strategy.simplifications(self.sol, self.maxlabels):
            self.sol.push_simplification(self.strategy, simplification)
            self._visit(callback)
            self.sol.pop_simplification()

    def __iter__(self) -> AutomaticSimplificationsIterator:
        """Return a lazy iterator producing the improvements of this search.

        Raises:
            RuntimeError: If the search was already driven.
        """
        self._mark_driven()
        from roundelim.auto.iterator import AutomaticSimplificationsIterator

        return AutomaticSimplificationsIterator(self)
