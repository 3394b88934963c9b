"""Automatic simplification search for round elimination.

Starting from a problem, the search alternates speedup steps with
simplifications proposed by a pluggable strategy, and reports every path
that the strategy judges better than the previous best one. Results can
be received through a callback (``AutomaticSimplifications.run``) or
pulled lazily by iterating over the search.
"""

from roundelim.auto.engine import AutomaticSimplifications
from roundelim.auto.iterator import AutomaticSimplificationsIterator
from roundelim.auto.sequence import INITIAL, SIMPLIFY, SPEEDUP, Sequence, Step
from roundelim.auto.strategy import Auto

__all__ = [
    "Auto",
    "AutomaticSimplifications",
    "AutomaticSimplificationsIterator",
    "Sequence",
    "Step",
    "INITIAL",
    "SPEEDUP",
    "SIMPLIFY",
]
