"""Tests for tabular rendering, improvement trees and label plots.

Run with: pytest test/test_render.py -v
"""

from pathlib import Path

import networkx as nx
import numpy as np
import pytest
from conftest import DeepestSpeedup, JustSimplified, ToyProblem, run_iterator

from roundelim.auto import INITIAL, SIMPLIFY, SPEEDUP, AutomaticSimplifications, Sequence
from roundelim.render import format_sequence, format_summary, sequence_rows
from roundelim.tree import ImprovementTree
from roundelim.visualize import label_trajectory, plot_label_trajectories, speedup_positions


def _path() -> Sequence:
    """Build the path initial -> speedup -> simplify(1)."""
    seq = Sequence.start(ToyProblem(2))
    seq.push_speedup()
    seq.push_simplification(DeepestSpeedup(), 1)
    return seq


class TestRender:
    """Tests for roundelim.render."""

    def test_sequence_rows(self) -> None:
        """One row per step with kind, simplification and labels."""
        assert sequence_rows(_path()) == [
            [0, INITIAL, "", 2],
            [1, SPEEDUP, "", 4],
            [2, SIMPLIFY, "1", 3],
        ]

    def test_format_sequence(self) -> None:
        """The rendered table has a header, a rule and one line per step."""
        lines = format_sequence(_path()).splitlines()
        assert "kind" in lines[0] and "labels" in lines[0]
        assert len(lines) == 2 + 3
        assert "simplify" in lines[-1]

    def test_format_summary(self) -> None:
        """One line per improvement."""
        results = run_iterator(AutomaticSimplifications(ToyProblem(2), DeepestSpeedup(), 3, 3))
        lines = format_summary(results, tablefmt="plain").splitlines()
        assert len(lines) == 1 + len(results)
        assert lines[1].split() == ["0", "2", "1", "4"]


class TestImprovementTree:
    """Tests for roundelim.tree.ImprovementTree."""

    def test_shared_prefix(self) -> None:
        """Two paths sharing a prefix share its nodes."""
        short = Sequence.start(ToyProblem(2))
        short.push_speedup()
        long = short.copy()
        long.push_speedup()
        tree = ImprovementTree.from_sequences([short, long])
        assert tree.number_of_nodes() == 3
        assert nx.is_tree(tree)
        assert tree.nodes[tree.root]["depth"] == 0
        assert [tree.nodes[key]["depth"] for key in tree.endpoints()] == [1, 2]

    def test_search_results(self) -> None:
        """Every improvement of a search ends at its own node, in order."""
        results = run_iterator(AutomaticSimplifications(ToyProblem(2), JustSimplified(), 2, 3))
        tree = ImprovementTree.from_sequences(results)
        ends = tree.endpoints()
        assert len(ends) == len(results) == 2
        assert [tree.nodes[key]["simplification"] for key in ends] == [1, 2]
        assert [tree.nodes[key]["num_labels"] for key in ends] == [3, 2]
        assert nx.is_arborescence(tree)

    def test_empty_tree_has_no_root(self) -> None:
        """Asking for the root of an empty tree is an error."""
        with pytest.raises(ValueError):
            ImprovementTree().root


class TestVisualize:
    """Tests for roundelim.visualize."""

    def test_label_trajectory(self) -> None:
        """Label counts and speedup positions along a path."""
        seq = _path()
        np.testing.assert_array_equal(label_trajectory(seq), [2, 4, 3])
        np.testing.assert_array_equal(speedup_positions(seq), [1])

    def test_plot_written(self, tmp_path: Path) -> None:
        """The figure is saved to the requested path."""
        results = run_iterator(AutomaticSimplifications(ToyProblem(2), DeepestSpeedup(), 3, 3))
        save_path = tmp_path / "labels.png"
        plot_label_trajectories(results, save_path, maxlabels=3)
        assert save_path.exists()
        assert save_path.stat().st_size > 0

    def test_plot_requires_sequences(self, tmp_path: Path) -> None:
        """Plotting nothing is rejected."""
        with pytest.raises(ValueError):
            plot_label_trajectories([], tmp_path / "labels.png")
