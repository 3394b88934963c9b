"""roundelim - automatic search over round elimination transformations.

Starting from a problem, repeatedly apply speedup steps and strategy-chosen
simplifications, reporting every chain of transformations that the
strategy judges better than the previous one.

Subpackages:
    auto: Path representation, strategy contract, recursive search and its
        resumable iterator
    search: Driver with stopping conditions and a live JSON report
    utils: Logging configuration

Modules:
    problem: Problem handle contract
    render: Tabular rendering of paths
    tree: Prefix tree of improvements
    visualize: Label-count plots
"""

from roundelim.auto import (
    INITIAL,
    SIMPLIFY,
    SPEEDUP,
    Auto,
    AutomaticSimplifications,
    AutomaticSimplificationsIterator,
    Sequence,
    Step,
)
from roundelim.problem import ProblemHandle

__all__ = [
    "Auto",
    "AutomaticSimplifications",
    "AutomaticSimplificationsIterator",
    "ProblemHandle",
    "Sequence",
    "Step",
    "INITIAL",
    "SPEEDUP",
    "SIMPLIFY",
]
