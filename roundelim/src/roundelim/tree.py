"""Prefix tree of the improvements produced by a search.

Consecutive improvements usually share a long prefix, since the search
is depth first. Merging them into a tree shows where the search
backtracked between two improvements.
"""

import logging
from collections.abc import Iterable
from typing import Any

import networkx as nx

from roundelim.auto.sequence import Sequence

logger = logging.getLogger(__name__)

NodeKey = tuple[tuple[str, Any], ...]


class ImprovementTree(nx.DiGraph):
    """Directed tree whose root-to-node paths are prefixes of improvements.

    A node is keyed by the ``(kind, simplification)`` pairs leading to it
    from the root, which identify the problem it holds since every step
    is a deterministic function of the previous one. Node attributes:

    - ``kind`` and ``simplification`` of the last step,
    - ``num_labels`` of its problem,
    - ``depth`` (root is 0),
    - ``improvements``: indices of the improvements ending at the node.

    Simplification values must be hashable to be used in node keys.
    """

    def add_sequence(self, sequence: Sequence) -> NodeKey:
        """Merge a path into the tree.

        Args:
            sequence: Improvement to add; its index is the number of
                improvements added before it.

        Returns:
            Key of the node where the path ends.
        """
        index = sum(len(data["improvements"]) for _, data in self.nodes(data=True))
        key: NodeKey = ()
        parent: NodeKey | None = None
        for depth, step in enumerate(sequence):
            key = key + ((step.kind, step.simplification),)
            if key not in self:
                self.add_node(
                    key,
                    kind=step.kind,
                    simplification=step.simplification,
                    num_labels=step.problem.num_labels(),
                    depth=depth,
                    improvements=[],
                )
                if parent is not None:
                    self.add_edge(parent, key)
            parent = key
        self.nodes[key]["improvements"].append(index)
        logger.debug("Improvement %d ends at depth %d", index, len(sequence) - 1)
        return key

    @classmethod
    def from_sequences(cls, sequences: Iterable[Sequence]) -> "ImprovementTree":
        """Build a tree from improvements given in discovery order."""
        tree = cls()
        for sequence in sequences:
            tree.add_sequence(sequence)
        return tree

    @property
    def root(self) -> NodeKey:
        """Return the key of the initial step.

        Raises:
            ValueError: If the tree is empty.
        """
        for key, data in self.nodes(data=True):
            if data["depth"] == 0:
                return key
        raise ValueError("Empty improvement tree has no root")

    def endpoints(self) -> list[NodeKey]:
        """Return the nodes where improvements end, in discovery order."""
        ends = [(i, key) for key, data in self.nodes(data=True) for i in data["improvements"]]
        return [key for _, key in sorted(ends)]
