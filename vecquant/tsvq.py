"""Tree-structured vector quantization by recursive median splits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from vecquant.distances import Distance
from vecquant.vector import Vector, mean_vector, to_half


@dataclass(frozen=True)
class TSVQNode:
    """A tree node holding the centroid of its training data and optional children."""

    centroid: Vector
    left: Optional[TSVQNode] = None
    right: Optional[TSVQNode] = None

    @classmethod
    def fit(cls, training_data: Iterable[Sequence[float]], max_depth: int) -> TSVQNode:
        """Build a subtree, splitting at the median of the highest-variance dimension."""
        data = [v if isinstance(v, Vector) else Vector(v) for v in training_data]
        centroid = mean_vector(data)
        dim = len(centroid)
        if max_depth == 0 or len(data) <= 1 or dim == 0:
            return cls(centroid)

        variances = [sum((v[i] - c) ** 2 for v in data) for i, c in enumerate(centroid)]
        # On ties the last dimension with the largest variance wins.
        split_dim = max(range(dim), key=lambda i: (variances[i], i))

        values = sorted(v[split_dim] for v in data)
        half = len(values) // 2
        if len(values) % 2 == 0:
            median = (values[half - 1] + values[half]) / 2.0
        else:
            median = values[half]

        left_data = [v for v in data if v[split_dim] <= median]
        right_data = [v for v in data if not v[split_dim] <= median]

        def child(part: list) -> Optional[TSVQNode]:
            if 0 < len(part) < len(data):
                return cls.fit(part, max_depth - 1)
            return None

        return cls(centroid, child(left_data), child(right_data))

    def find_leaf(self, vector: Sequence[float], distance: Distance) -> TSVQNode:
        """Descend towards the nearer child until a leaf is reached."""
        node = self
        while True:
            left, right = node.left, node.right
            if left is not None and right is not None:
                if distance.compute(vector, left.centroid) <= distance.compute(vector, right.centroid):
                    node = left
                else:
                    node = right
            elif left is not None:
                node = left
            elif right is not None:
                node = right
            else:
                return node


class TSVQ:
    """A binary tree of centroids; quantization returns the centroid of the reached leaf."""

    def __init__(self, training_data: Iterable[Sequence[float]], max_depth: int, distance: Distance) -> None:
        self.root = TSVQNode.fit(training_data, max_depth)
        self.distance = distance

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Return the leaf centroid for ``vector``, rounded to half precision."""
        values = tuple(vector)
        if len(values) != len(self.root.centroid):
            raise ValueError("Input vector has wrong dimension")
        leaf = self.root.find_leaf(values, self.distance)
        return to_half(leaf.centroid)