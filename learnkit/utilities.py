"""Miscellaneous helpers shared across the library."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["sort_int_map", "floats_to_matrix", "vector_to_matrix"]


def sort_int_map(mapping: Mapping[int, float]) -> list[int]:
    """Return the keys of ``mapping`` ordered by ascending value."""
    return sorted(mapping, key=mapping.__getitem__)


def floats_to_matrix(floats: Iterable[float]) -> np.ndarray:
    """Return a ``1 x n`` matrix holding ``floats``."""
    values = np.asarray(list(floats), dtype=float)
    return values.reshape(1, len(values))


def vector_to_matrix(vector: ArrayLike) -> np.ndarray:
    """Return a copy of ``vector`` as a ``1 x n`` row matrix."""
    values = np.array(vector, dtype=float, copy=True).ravel()
    return values.reshape(1, len(values))