"""Driven automatic search.

Pulls improvements lazily from
:class:`~roundelim.auto.engine.AutomaticSimplifications`, stopping on
exhaustion, on an improvement limit, or on a time budget, and records
them in a live JSON report.
"""

from roundelim.search.config import SearchConfig
from roundelim.search.report import SearchReport
from roundelim.search.search import EXHAUSTED, MAX_RESULTS, TIMEOUT, SearchResults, search

__all__ = ["search", "SearchConfig", "SearchReport", "SearchResults", "EXHAUSTED", "MAX_RESULTS", "TIMEOUT"]
