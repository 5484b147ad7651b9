"""Ordinary least-squares linear regression solved by QR decomposition."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["NotEnoughDataError", "NoTrainingDataError", "LinearRegression"]


class NotEnoughDataError(ValueError):
    """Raised when there are fewer rows than the model has coefficients."""

    def __init__(self) -> None:
        super().__init__("not enough rows to support this many variables.")


class NoTrainingDataError(RuntimeError):
    """Raised when predicting with a model that has not been fitted."""

    def __init__(self) -> None:
        super().__init__("you need to fit() before you can predict()")


class LinearRegression:
    """Linear model ``y = intercept + x . coefficients``."""

    def __init__(self) -> None:
        self.fitted = False
        self.intercept = 0.0
        self.coefficients = np.zeros(0)

    def fit(self, x: ArrayLike, y: ArrayLike) -> None:
        """Fit the model to the rows of ``x`` and the observed values ``y``."""
        features = np.asarray(x, dtype=float)
        if features.ndim == 1:
            features = features.reshape(-1, 1)
        if features.ndim != 2:
            raise ValueError("x must be a matrix")
        observed = np.asarray(y, dtype=float).ravel()
        rows = features.shape[0]
        if observed.shape[0] != rows:
            raise ValueError("x and y must have the same number of rows")

        cols = features.shape[1] + 1
        if rows < cols:
            raise NotEnoughDataError()

        explanatory = np.hstack([np.ones((rows, 1)), features])
        q, r = np.linalg.qr(explanatory)
        solution = np.linalg.solve(r, q.T @ observed)

        self.intercept = float(solution[0])
        self.coefficients = solution[1:].copy()
        self.fitted = True

    def predict(self, x: ArrayLike) -> np.ndarray:
        """Return a prediction for every row of ``x``."""
        if not self.fitted:
            raise NoTrainingDataError()
        features = np.asarray(x, dtype=float)
        if features.ndim == 1:
            features = features.reshape(-1, 1)
        if features.ndim != 2 or features.shape[1] != len(self.coefficients):
            raise ValueError(
                f"expected a matrix with {len(self.coefficients)} columns"
            )
        return self.intercept + features @ self.coefficients