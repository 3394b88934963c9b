"""Tabular rendering of search paths."""

from collections.abc import Iterable
from typing import Any

from tabulate import tabulate

from roundelim.auto.sequence import SIMPLIFY, Sequence

_STEP_HEADERS = ["step", "kind", "simplification", "labels"]
_SUMMARY_HEADERS = ["improvement", "steps", "speedups", "labels"]


def sequence_rows(sequence: Sequence) -> list[list[Any]]:
    """Return one ``[index, kind, simplification, labels]`` row per step."""
    rows: list[list[Any]] = []
    for i, step in enumerate(sequence):
        simplification = repr(step.simplification) if step.kind == SIMPLIFY else ""
        rows.append([i, step.kind, simplification, step.problem.num_labels()])
    return rows


def format_sequence(sequence: Sequence, tablefmt: str = "simple") -> str:
    """Render a path as a table with one row per step.

    Args:
        sequence: Path to render.
        tablefmt: Any tabulate table format.

    Returns:
        The rendered table.
    """
    return tabulate(sequence_rows(sequence), headers=_STEP_HEADERS, tablefmt=tablefmt)


def format_summary(sequences: Iterable[Sequence], tablefmt: str = "simple") -> str:
    """Render one row per improvement: its length, speedups and final label count.

    Args:
        sequences: Improvements in discovery order.
        tablefmt: Any tabulate table format.

    Returns:
        The rendered table.
    """
    rows = [[i, len(seq), seq.speedups, seq.current().num_labels()] for i, seq in enumerate(sequences)]
    return tabulate(rows, headers=_SUMMARY_HEADERS, tablefmt=tablefmt)
