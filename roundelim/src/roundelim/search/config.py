"""Settings for a driven automatic search."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Budgets and stopping conditions for :func:`roundelim.search.search`.

    ``maxiter`` and ``maxlabels`` are passed to the search engine and bound
    the explored tree. ``max_results`` and ``timeout_s`` only decide when
    the driver stops pulling improvements; the timeout is checked between
    two improvements, never in the middle of the exploration.

    Attributes:
        maxiter: Maximum number of speedup steps.
        maxlabels: Label threshold; ``0`` means always speed up.
        max_results: Stop after this many improvements (``math.inf`` for all).
        timeout_s: Stop once this many seconds have elapsed, or None.
        progress: Show a tqdm progress bar of the improvements found.
    """

    maxiter: int
    maxlabels: int
    max_results: float = math.inf
    timeout_s: float | None = None
    progress: bool = False

    def __post_init__(self) -> None:
        """Validate the budgets.

        Raises:
            ValueError: If a budget is negative, a limit is not positive, or
                ``max_results`` is neither an integer nor ``math.inf``.
        """
        if self.maxiter < 0:
            raise ValueError(f"maxiter must be non-negative, got {self.maxiter}")
        if self.maxlabels < 0:
            raise ValueError(f"maxlabels must be non-negative, got {self.maxlabels}")
        if not isinstance(self.max_results, int) and self.max_results != math.inf:
            raise ValueError(f"max_results must be an integer or math.inf, got {self.max_results}")
        if self.max_results <= 0:
            raise ValueError(f"max_results must be positive, got {self.max_results}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")
