"""Plots of how label counts evolve along search paths."""

from collections.abc import Sequence as SequenceOf
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from roundelim.auto.sequence import SPEEDUP, Sequence


def label_trajectory(sequence: Sequence) -> np.ndarray:
    """Return the number of labels after each step of a path."""
    return np.array([step.problem.num_labels() for step in sequence], dtype=np.int64)


def speedup_positions(sequence: Sequence) -> np.ndarray:
    """Return the indices of the speedup steps of a path."""
    return np.array([i for i, step in enumerate(sequence) if step.kind == SPEEDUP], dtype=np.int64)


def plot_label_trajectories(sequences: SequenceOf[Sequence], save_path: Path, maxlabels: int | None = None) -> None:
    """Plot label count per step, one line per path.

    Speedup steps are marked with an ``X``; simplification steps are the
    plain segments in between.

    Args:
        sequences: Paths to plot, typically the improvements of a search.
        save_path: File the figure is saved to (format from the suffix).
        maxlabels: If given, draw the label threshold as a dashed line.

    Raises:
        ValueError: If ``sequences`` is empty.
    """
    if not sequences:
        raise ValueError("Nothing to plot: no sequences given")

    fig, ax = plt.subplots()
    for i, sequence in enumerate(sequences):
        labels = label_trajectory(sequence)
        steps = np.arange(len(labels))
        (line,) = ax.plot(steps, labels, label=f"improvement {i}")
        marks = speedup_positions(sequence)
        ax.scatter(marks, labels[marks], marker="X", color=line.get_color())

    if maxlabels is not None:
        ax.axhline(maxlabels, linestyle="--", color="gray", label="maxlabels")

    ax.set_xlabel("Step")
    ax.set_ylabel("Labels")
    ax.set_title("Labels along search paths")
    ax.legend()
    fig.tight_layout()
    fig.savefig(save_path)
    plt.close(fig)
