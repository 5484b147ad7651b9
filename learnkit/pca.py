"""Principal component analysis via singular value decomposition."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["PCA", "column_mean", "subtract_row_vector"]


class PCA:
    """Principal component analysis.

    ``num_components`` of 0 keeps every component the decomposition yields.
    """

    def __init__(self, num_components: int = 0) -> None:
        self.num_components = num_components
        self._components: np.ndarray | None = None

    def fit(self, x: ArrayLike) -> PCA:
        """Centre ``x`` on its column means and decompose it."""
        centred = subtract_row_vector(x, column_mean(x))
        _, _, vh = np.linalg.svd(centred, full_matrices=False)
        if self.num_components < 0:
            raise ValueError("number of components can't be less than zero")
        self._components = vh.T
        return self

    def transform(self, x: ArrayLike) -> np.ndarray:
        """Project ``x`` onto the fitted components."""
        if self._components is None:
            raise RuntimeError("the PCA model must be fitted before transforming")
        matrix = np.asarray(x, dtype=float)
        num_samples, num_features = matrix.shape
        projected = matrix @ self._components
        if self.num_components == 0 or self.num_components > num_features:
            return projected
        result = np.zeros((num_samples, self.num_components))
        kept = min(self.num_components, projected.shape[1])
        result[:, :kept] = projected[:, :kept]
        return result

    def fit_transform(self, x: ArrayLike) -> np.ndarray:
        """Fit the model and project the centred data."""
        centred = subtract_row_vector(x, column_mean(x))
        return self.fit(x).transform(centred)


def column_mean(matrix: ArrayLike) -> np.ndarray:
    """Return the mean of each column as a ``1 x cols`` matrix."""
    values = np.asarray(matrix, dtype=float)
    rows, cols = values.shape
    return (values.sum(axis=0) / rows).reshape(1, cols)


def subtract_row_vector(matrix: ArrayLike, vector: ArrayLike) -> np.ndarray:
    """Subtract the first row of ``vector`` from every row of ``matrix``."""
    values = np.asarray(matrix, dtype=float)
    row = np.asarray(vector, dtype=float)
    if row.ndim != 2 or row.shape[1] != values.shape[1]:
        raise ValueError("error in dimension")
    return values - row[0]