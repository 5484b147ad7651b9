"""Activation functions used by the neural network neurons."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

__all__ = [
    "ActivationFunction",
    "NeuralFunction",
    "SIGMOID",
    "LINEAR",
    "SOFTPLUS_RECTIFIER",
]

ActivationFunction = Callable[[Any], Any]


@dataclass(frozen=True)
class NeuralFunction:
    """A pair of activation functions: ``forward`` and its ``backward`` derivative.

    Both accept a float or a NumPy array and work element-wise.
    """

    forward: ActivationFunction
    backward: ActivationFunction


def _floats(value: Any) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _sigmoid_forward(value: Any) -> Any:
    with np.errstate(over="ignore"):
        return (1.0 / (1.0 + np.exp(-_floats(value))))[()]


def _sigmoid_backward(value: Any) -> Any:
    v = _floats(value)
    return (v * (1.0 - v))[()]


def _linear_forward(value: Any) -> Any:
    return _floats(value).copy()[()]


def _linear_backward(value: Any) -> Any:
    return np.ones(_floats(value).shape)[()]


def _softplus_forward(value: Any) -> Any:
    with np.errstate(over="ignore"):
        return np.log(1.0 + np.exp(_floats(value)))[()]


SIGMOID = NeuralFunction(_sigmoid_forward, _sigmoid_backward)
"""Logistic sigmoid ``1 / (1 + e^-t)``; its derivative is expressed on outputs."""

LINEAR = NeuralFunction(_linear_forward, _linear_backward)
"""Identity function with a constant derivative of one."""

SOFTPLUS_RECTIFIER = NeuralFunction(_softplus_forward, _sigmoid_backward)
"""Softplus ``log(1 + e^t)``, sharing the sigmoid's derivative form."""