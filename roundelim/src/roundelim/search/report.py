"""Structured JSON report for automatic search progress.

Manages a live-overwritten JSON file that records the search budgets and
every improvement as soon as it is found, so a long search can be
inspected (or killed) while it runs without losing what it produced.
"""

import json
from pathlib import Path
from typing import Any

from roundelim.auto.sequence import SIMPLIFY, Sequence

_EMPTY_REPORT: dict[str, Any] = {
    "search": {
        "maxiter": 0,
        "maxlabels": 0,
        "max_results": None,
        "timeout_s": None,
        "improvements": 0,
        "stop_reason": None,
        "elapsed_s": 0.0,
    },
    "improvements": [],
}


def sequence_entry(index: int, sequence: Sequence) -> dict[str, Any]:
    """Describe one improvement as a JSON-serializable dict.

    Args:
        index: Position of the improvement in discovery order.
        sequence: The improvement.

    Returns:
        Dict with step kinds, label counts and simplifications of the path.
    """
    return {
        "index": index,
        "steps": len(sequence),
        "speedups": sequence.speedups,
        "kinds": list(sequence.kinds()),
        "labels": [step.problem.num_labels() for step in sequence],
        "simplifications": [repr(step.simplification) for step in sequence if step.kind == SIMPLIFY],
        "final": None if sequence[-1].result is None else str(sequence[-1].result),
    }


class SearchReport:
    """Manages a live JSON report file for one search.

    Attributes:
        path: Path to the JSON report file.
    """

    def __init__(self, path: Path) -> None:
        """Initialize an empty report and write it to disk.

        Args:
            path: File path for the JSON report.
        """
        self.path = path
        self._data: dict[str, Any] = json.loads(json.dumps(_EMPTY_REPORT))
        self._write()

    @property
    def data(self) -> dict[str, Any]:
        """Return the report contents as last written."""
        return self._data

    def set_budgets(self, maxiter: int, maxlabels: int, max_results: float, timeout_s: float | None) -> None:
        """Record the budgets the search runs with.

        Args:
            maxiter: Maximum number of speedup steps.
            maxlabels: Label threshold.
            max_results: Improvement limit, ``math.inf`` for none.
            timeout_s: Wall-clock limit in seconds, or None.
        """
        search = self._data["search"]
        search["maxiter"] = maxiter
        search["maxlabels"] = maxlabels
        search["max_results"] = None if max_results == float("inf") else int(max_results)
        search["timeout_s"] = timeout_s
        self._write()

    def add_improvement(self, sequence: Sequence) -> None:
        """Append an improvement entry.

        Args:
            sequence: The improvement, as produced by the search.
        """
        improvements = self._data["improvements"]
        improvements.append(sequence_entry(len(improvements), sequence))
        self._data["search"]["improvements"] = len(improvements)
        self._write()

    def finish(self, stop_reason: str, elapsed_s: float) -> None:
        """Record why and when the search stopped.

        Args:
            stop_reason: ``"exhausted"``, ``"max_results"`` or ``"timeout"``.
            elapsed_s: Wall-clock duration of the search.
        """
        self._data["search"]["stop_reason"] = stop_reason
        self._data["search"]["elapsed_s"] = round(elapsed_s, 3)
        self._write()

    def _write(self) -> None:
        """Atomically write the report to disk."""
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(self._data, indent=2) + "\n")
        tmp_path.rename(self.path)
