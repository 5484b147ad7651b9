import math

import numpy as np
import pytest

from learnkit.pairwise import (
    Chebyshev,
    Cosine,
    Cranberra,
    Euclidean,
    Manhattan,
    PolyKernel,
    RBFKernel,
)


def column(values):
    return np.array(values, dtype=float).reshape(-1, 1)


# Chebyshev

def test_chebyshev_column_vectors():
    x = column([1, 2, 3, 4])
    y = column([-5, -6, 7, 8])
    assert Chebyshev().distance(x, y) == 8


def test_chebyshev_row_vectors():
    x = column([1, 2, 3, 4]).T
    y = column([-5, -6, 7, 8]).T
    assert Chebyshev().distance(x, y) == 8


def test_chebyshev_mismatched_dimensions():
    x = column([1, 2, 3, 4]).T
    y = column([-5, -6, 7, 8])
    with pytest.raises(ValueError):
        Chebyshev().distance(x, y)


# Cosine

def test_cosine_dot():
    x = column([1, 2, 3])
    y = column([2, 4, 6])
    assert Cosine().dot(x, y) == 28


def test_cosine_distance_of_parallel_vectors():
    x = column([1, 2, 3])
    y = column([2, 4, 6])
    assert Cosine().distance(x, y) == pytest.approx(0.0, abs=1e-12)


def test_cosine_dot_mismatched_dimensions():
    with pytest.raises(ValueError):
        Cosine().dot(column([1, 2, 3]).T, column([1, 2, 3]))


# Cranberra

def test_cranberra_same_vectors():
    vec = column([0, 1, -2, 3.4, 5, -6.7, 89])
    assert Cranberra().distance(vec, vec) == 0


def test_cranberra_column_vectors():
    x = column([1, 2, 3, 4, 9])
    y = column([-5, -6, 7, 4, 3])
    assert Cranberra().distance(x, y) == pytest.approx(2.9)


def test_cranberra_row_vectors():
    x = column([1, 2, 3, 4, 9]).T
    y = column([-5, -6, 7, 4, 3]).T
    assert Cranberra().distance(x, y) == pytest.approx(2.9)


def test_cranberra_mismatched_dimensions():
    x = column([1, 2, 3, 4, 9]).T
    y = column([-5, -6, 7, 4, 3])
    with pytest.raises(ValueError):
        Cranberra().distance(x, y)


# Euclidean

def test_euclidean_inner_product():
    x = column([1, 2, 3])
    y = column([2, 4, 5])
    assert Euclidean().inner_product(x, y) == 25


def test_euclidean_distance():
    x = column([1, 2, 3])
    y = column([2, 4, 5])
    assert Euclidean().distance(x, y) == 3


def test_euclidean_accepts_flat_sequences():
    assert Euclidean().distance([1, 2, 3], [2, 4, 5]) == 3


# Manhattan

def test_manhattan_same_vectors():
    vec = column([0, 1, -2, 3.4, 5, -6.7, 89])
    assert Manhattan().distance(vec, vec) == 0


def test_manhattan_column_vectors():
    x = column([2, 2, 3])
    y = column([1, 4, 5])
    assert Manhattan().distance(x, y) == 5


def test_manhattan_row_vectors():
    x = column([2, 2, 3]).T
    y = column([1, 4, 5]).T
    assert Manhattan().distance(x, y) == 5


def test_manhattan_mismatched_dimensions():
    x = column([2, 2, 3]).T
    y = column([1, 4, 5])
    with pytest.raises(ValueError):
        Manhattan().distance(x, y)


# Polynomial kernel

def test_poly_kernel_inner_product():
    x = column([1, 2, 3])
    y = column([2, 4, 5])
    assert PolyKernel(3).inner_product(x, y) == 17576


def test_poly_kernel_distance():
    x = column([1, 2, 3])
    y = column([2, 4, 5])
    assert PolyKernel(3).distance(x, y) == pytest.approx(31.622776601683793)


# RBF kernel

def test_rbf_kernel_inner_product():
    x = column([1, 2, 3])
    y = column([2, 4, 5])
    assert RBFKernel(0.1).inner_product(x, y) == pytest.approx(0.4065696597405991)


def test_rbf_kernel_of_identical_vectors_is_one():
    x = column([1, 2, 3])
    assert math.isclose(RBFKernel(0.5).inner_product(x, x), 1.0)