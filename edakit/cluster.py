"""K-means clustering of the rows of a matrix."""

from __future__ import annotations

import random

from edakit.matrix import Matrix
from edakit.vectors import add_into, avg_abs_diff, distance, divide

_EPSILON = 0.001
_MAX_ITERATIONS = 10


class Cluster:
    """Groups the rows of a matrix around k centroids."""

    def __init__(self, mat: Matrix, k: int = 8) -> None:
        if k < 1:
            raise ValueError("at least one cluster is needed")
        self.data = mat
        self.k = k
        self.centroids = Matrix(k, mat.dim)
        self._inds: list[list[int]] = [[] for _ in range(k)]

    def compute_clusters(self) -> None:
        """Assign every row to its nearest centroid (the first one on ties)."""
        centroids = [self.centroids.row(j) for j in range(self.k)]
        groups: list[list[int]] = [[] for _ in range(self.k)]
        for i in range(self.data.n):
            point = self.data.row(i)
            best = min(range(self.k), key=lambda j: distance(point, centroids[j]))
            groups[best].append(i)
        self._inds = groups

    def update_centroids(self) -> None:
        """Move each non-empty cluster's centroid to the mean of its rows."""
        for j, members in enumerate(self._inds):
            if members:
                total = [0.0] * self.data.dim
                for i in members:
                    add_into(total, self.data.row(i))
                self.centroids.set_row(j, divide(total, len(members)))

    def apply_clustering(self, rng: random.Random | None = None) -> int:
        """Run k-means from random centroids; return the number of rounds done."""
        self.centroids.set_all_random(rng)
        change = 1000.0
        rounds = 0
        while change > _EPSILON and rounds < _MAX_ITERATIONS:
            previous = list(self.centroids.data)
            self.compute_clusters()
            self.update_centroids()
            change = avg_abs_diff(previous, self.centroids.data)
            rounds += 1
        return rounds

    def centroid(self, i: int) -> list[float]:
        return self.centroids.row(i)

    def indices(self, i: int) -> list[int]:
        """Row numbers currently assigned to cluster i."""
        return list(self._inds[i])

    def render(self) -> str:
        return self.centroids.render()