"""Pairwise distances and kernel inner products between matrices."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "PairwiseDistance",
    "Chebyshev",
    "Cosine",
    "Cranberra",
    "Euclidean",
    "Manhattan",
    "PolyKernel",
    "RBFKernel",
]


class PairwiseDistance(Protocol):
    """Anything that can measure the distance between two matrices."""

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        ...


def _as_matrix(value: ArrayLike) -> np.ndarray:
    """Return ``value`` as a 2-D float array; 1-D input becomes a column."""
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError(f"expected a vector or matrix, got {arr.ndim} dimensions")
    return arr


def _matching_pair(x: ArrayLike, y: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    a, b = _as_matrix(x), _as_matrix(y)
    if a.shape != b.shape:
        raise ValueError(f"dimension mismatch: {a.shape} and {b.shape}")
    return a, b


def _elementwise_sum(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sum(a * b))


class Chebyshev:
    """Chebyshev (L-infinity) distance."""

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        return float(np.max(np.abs(a - b), initial=0.0))


class Cosine:
    """Cosine distance, ``1 - cos(angle)``, ranging from 0 to 2."""

    def dot(self, x: ArrayLike, y: ArrayLike) -> float:
        """Sum of the element-wise product of ``x`` and ``y``."""
        a, b = _matching_pair(x, y)
        return _elementwise_sum(a, b)

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        dot_xy = np.float64(self.dot(x, y))
        length_x = np.sqrt(np.float64(self.dot(x, x)))
        length_y = np.sqrt(np.float64(self.dot(y, y)))
        with np.errstate(divide="ignore", invalid="ignore"):
            cos = dot_xy / (length_x * length_y)
        return float(1.0 - cos)


class Cranberra:
    """Canberra distance: the sum of ``|p - q| / (|p| + |q|)``."""

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        numerators = np.abs(a - b)
        denominators = np.abs(a) + np.abs(b)
        terms = np.divide(
            numerators,
            denominators,
            out=np.zeros_like(numerators),
            where=~((numerators == 0.0) & (denominators == 0.0)),
        )
        return sum((float(t) for t in terms.flat), 0.0)


class Euclidean:
    """Euclidean (L2) distance."""

    def inner_product(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        return _elementwise_sum(a, b)

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        difference = a - b
        return math.sqrt(self.inner_product(difference, difference))


class Manhattan:
    """Manhattan (L1) distance."""

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        return float(np.sum(np.abs(a - b)))


class PolyKernel:
    """Polynomial kernel ``K(x, y) = (x . y + 1) ** degree``."""

    def __init__(self, degree: int) -> None:
        self.degree = degree

    def inner_product(self, x: ArrayLike, y: ArrayLike) -> float:
        """Kernel value computed on the first column of each matrix."""
        col_x = _as_matrix(x)[:, 0]
        col_y = _as_matrix(y)[:, 0]
        if col_x.shape != col_y.shape:
            raise ValueError(
                f"dimension mismatch: {col_x.shape[0]} and {col_y.shape[0]}"
            )
        result = float(np.dot(col_x, col_y))
        return math.pow(result + 1.0, float(self.degree))

    def distance(self, x: ArrayLike, y: ArrayLike) -> float:
        a, b = _matching_pair(x, y)
        difference = a - b
        return math.sqrt(self.inner_product(difference, difference))


class RBFKernel:
    """Radial basis function kernel ``K(x, y) = exp(-gamma * ||x - y||^2)``."""

    def __init__(self, gamma: float) -> None:
        self.gamma = gamma

    def inner_product(self, x: ArrayLike, y: ArrayLike) -> float:
        distance = Euclidean().distance(x, y)
        return math.exp(-self.gamma * distance**2)