"""Driver consuming an automatic search incrementally.

The search tree can be far too large to explore completely, so the
driver pulls improvements one at a time from the lazy iterator and stops
as soon as the tree is exhausted, enough improvements were collected, or
the time budget is spent. Every improvement is logged and, when a cache
directory is given, appended to a live JSON report.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tqdm import tqdm

from roundelim.auto.engine import AutomaticSimplifications
from roundelim.auto.sequence import Sequence
from roundelim.auto.strategy import Auto
from roundelim.problem import ProblemHandle
from roundelim.render import format_sequence
from roundelim.search.config import SearchConfig
from roundelim.search.report import SearchReport

logger = logging.getLogger(__name__)

EXHAUSTED = "exhausted"
MAX_RESULTS = "max_results"
TIMEOUT = "timeout"


@dataclass
class SearchResults:
    """Improvements collected by :func:`search`.

    Attributes:
        improvements: Every improvement, in discovery order.
        stop_reason: ``EXHAUSTED``, ``MAX_RESULTS`` or ``TIMEOUT``.
        elapsed_s: Wall-clock duration of the search.
    """

    improvements: list[Sequence] = field(default_factory=list)
    stop_reason: str = EXHAUSTED
    elapsed_s: float = 0.0

    @property
    def best(self) -> Sequence | None:
        """Return the last (hence best) improvement, or None."""
        return self.improvements[-1] if self.improvements else None

    def __len__(self) -> int:
        """Return the number of improvements."""
        return len(self.improvements)


def _stop_reason(results: SearchResults, config: SearchConfig, start: float) -> str | None:
    """Return why the driver should stop before pulling again, or None."""
    if len(results) >= config.max_results:
        return MAX_RESULTS
    if config.timeout_s is not None and time.perf_counter() - start >= config.timeout_s:
        return TIMEOUT
    return None


def search(
    problem: ProblemHandle, strategy: Auto[Any], config: SearchConfig, save_cache: Path | None = None
) -> SearchResults:
    """Run an automatic search and collect its improvements.

    Args:
        problem: Initial problem.
        strategy: Search policy.
        config: Budgets and stopping conditions.
        save_cache: Directory for ``results.json``, or None to skip the report.

    Returns:
        SearchResults with the improvements found before stopping.
    """
    report = None
    if save_cache is not None:
        save_cache.mkdir(parents=True, exist_ok=True)
        report = SearchReport(save_cache / "results.json")
        report.set_budgets(config.maxiter, config.maxlabels, config.max_results, config.timeout_s)

    auto = AutomaticSimplifications(problem, strategy, config.maxiter, config.maxlabels)
    logger.info(
        "Search root: %d labels, maxiter=%d, maxlabels=%d",
        problem.num_labels(),
        config.maxiter,
        config.maxlabels,
    )

    results = SearchResults()
    start = time.perf_counter()
    total = None if math.isinf(config.max_results) else int(config.max_results)
    pbar = tqdm(total=total, desc="Searching", unit="improvements", disable=not config.progress)
    try:
        improvements = iter(auto)
        while True:
            reason = _stop_reason(results, config, start)
            if reason is not None:
                results.stop_reason = reason
                break
            sequence = next(improvements, None)
            if sequence is None:
                results.stop_reason = EXHAUSTED
                break
            results.improvements.append(sequence)
            pbar.update(1)
            logger.info("Improvement %d:\n%s", len(results) - 1, format_sequence(sequence))
            if report is not None:
                report.add_improvement(sequence)
    finally:
        pbar.close()

    results.elapsed_s = time.perf_counter() - start
    if report is not None:
        report.finish(results.stop_reason, results.elapsed_s)
    logger.info("Search stopped (%s): %d improvements in %.2fs", results.stop_reason, len(results), results.elapsed_s)
    return results
