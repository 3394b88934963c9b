"""Resumable iterator over the improvements of an automatic search.

The recursive search in :mod:`roundelim.auto.engine` pushes a step before
every recursive call and pops it right after, so it cannot simply be
paused between two improvements. Here the call stack is replaced by an
explicit stack of markers, one per pending call site:

``_PROBLEM``
    entering a visit: check for an improvement (the only place where a
    value is produced).
``_PROBLEM_AFTER_CHECK_YIELD``
    check whether the subtree is worth exploring.
``_EXPAND``
    entering an expansion: either descend into a speedup or start
    iterating over the strategy's candidates.
``_SIMPLIFY_AFTER_PROBLEM_CALL``
    back from the speedup child: undo the speedup.
``_Candidates``
    iterating over the candidates: descend into the next one, or return.
``_SIMPLIFY_AFTER_SIMPLIFY_CALL``
    back from a simplification child: undo the simplification.

Each call to ``next`` processes markers until one improvement is found
or the stack runs empty, so the caller decides how much of the tree gets
explored.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from roundelim.auto.engine import AutomaticSimplifications
from roundelim.auto.sequence import Sequence

_PROBLEM = "problem"
_PROBLEM_AFTER_CHECK_YIELD = "problem_after_check_yield"
_EXPAND = "expand"
_SIMPLIFY_AFTER_PROBLEM_CALL = "simplify_after_problem_call"
_SIMPLIFY_AFTER_SIMPLIFY_CALL = "simplify_after_simplify_call"

_EXHAUSTED = object()


@dataclass
class _Candidates:
    """Marker for a loop over the strategy's simplifications.

    Attributes:
        it: The remaining candidates.
    """

    it: Iterator[Any]


class AutomaticSimplificationsIterator:
    """Iterator producing a copy of every new best path, in discovery order.

    Produces exactly the same paths, in the same order, as
    :meth:`AutomaticSimplifications.run`. Once it raises
    ``StopIteration`` the live path is back to the initial step and every
    further call raises ``StopIteration`` again.

    Attributes:
        auto: The search state being driven.
        stack: Pending markers, the last one is processed first.
    """

    def __init__(self, auto: AutomaticSimplifications) -> None:
        """Prepare to visit the root of ``auto``'s search tree.

        Args:
            auto: Search state, freshly constructed.
        """
        self.auto = auto
        self.stack: list[str | _Candidates] = [_PROBLEM]

    def __iter__(self) -> AutomaticSimplificationsIterator:
        return self

    def __next__(self) -> Sequence:
        """Resume the search until the next improvement.

        Returns:
            A copy of the new best path.

        Raises:
            StopIteration: When the whole tree has been explored.
        """
        auto = self.auto
        sol = auto.sol
        stack = self.stack
        while stack:
            marker = stack[-1]
            if marker == _PROBLEM:
                stack.pop()
                stack.append(_PROBLEM_AFTER_CHECK_YIELD)
                if auto.check_yield():
                    return auto.best.copy()
            elif marker == _PROBLEM_AFTER_CHECK_YIELD:
                stack.pop()
                if auto.check_continue():
                    stack.append(_EXPAND)
            elif marker == _EXPAND:
                stack.pop()
                if auto.wants_speedup():
                    sol.push_speedup()
                    stack.append(_SIMPLIFY_AFTER_PROBLEM_CALL)
                    stack.append(_PROBLEM)
                else:
                    candidates = auto.strategy.simplifications(sol, auto.maxlabels)
                    stack.append(_Candidates(iter(candidates)))
            elif marker == _SIMPLIFY_AFTER_PROBLEM_CALL:
                sol.pop_speedup()
                stack.pop()
            elif marker == _SIMPLIFY_AFTER_SIMPLIFY_CALL:
                sol.pop_simplification()
                stack.pop()
            else:
                simplification = next(marker.it, _EXHAUSTED)
                if simplification is _EXHAUSTED:
                    stack.pop()
                else:
                    sol.push_simplification(auto.strategy, simplification)
                    stack.append(_SIMPLIFY_AFTER_SIMPLIFY_CALL)
                    stack.append(_PROBLEM)
        raise StopIteration

    def depth(self) -> int:
        """Return the number of pending markers."""
        return len(self.stack)

