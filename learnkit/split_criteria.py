"""Impurity measures used to choose decision-tree splits.

Class distributions are mappings from class label to count. A split
distribution maps each branch value to the class distribution that falls
into that branch.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence

__all__ = [
    "base_entropy",
    "split_entropy",
    "numeric_split_entropy",
    "gini_impurity",
    "average_gini_index",
    "information_gain",
    "information_gain_ratio",
]

ClassDistribution = Mapping[str, int]
SplitDistribution = Mapping[str, Mapping[str, int]]


def _plogp(part: float, whole: float) -> float:
    """Return ``p * log2(p)`` for ``p = part / whole``, taking 0 log 0 as 0."""
    if part == 0:
        return 0.0
    p = part / whole
    return p * math.log2(p)


def _conditional_entropy(branches: Iterable[Iterable[int]]) -> float:
    """Entropy of the class given the branch, weighted by branch size."""
    counts = [list(branch) for branch in branches]
    total = sum(sum(branch) for branch in counts)
    if total == 0:
        return 0.0
    result = 0.0
    for branch in counts:
        subtotal = sum(branch)
        result -= sum(_plogp(c, total) for c in branch)
        result += _plogp(subtotal, total)
    return result


def base_entropy(distribution: ClassDistribution) -> float:
    """Entropy, in bits, of a class distribution before any split."""
    total = sum(distribution.values())
    if total == 0:
        return 0.0
    return -sum(_plogp(count, total) for count in distribution.values())


def split_entropy(distribution: SplitDistribution) -> float:
    """Entropy, in bits, of the class distribution after a split."""
    return _conditional_entropy(branch.values() for branch in distribution.values())


def numeric_split_entropy(
    values: Sequence[float], classes: Sequence[str]
) -> tuple[float, float]:
    """Find the threshold on a numeric attribute that minimises split entropy.

    Candidate thresholds are midpoints between neighbouring sorted values;
    a row goes to the lower branch when its value is below the threshold.
    Returns ``(entropy, threshold)``; both are infinite when there is no
    candidate threshold.
    """
    if len(values) != len(classes):
        raise ValueError("values and classes must have the same length")

    class_index: dict[str, int] = {}
    refs = sorted(
        ((float(v), class_index.setdefault(c, len(class_index))) for v, c in zip(values, classes)),
        key=lambda ref: ref[0],
    )
    num_classes = len(class_index)

    below = [0] * num_classes
    above = [0] * num_classes
    for _, cls in refs:
        above[cls] += 1

    best_entropy = math.inf
    best_value = math.inf
    prev_value = math.nan
    moved = 0
    i = 0
    n = len(refs)
    while i < n - 1:
        threshold = (refs[i][0] + refs[i + 1][0]) / 2
        if threshold == prev_value:
            i += 1
            continue
        while moved < n and refs[moved][0] < threshold:
            cls = refs[moved][1]
            below[cls] += 1
            above[cls] -= 1
            moved += 1
            i += 1
        prev_value = threshold
        if sum(below) == 0:
            # An empty lower branch gives no usable split.
            continue
        entropy = _conditional_entropy((below, above))
        if entropy < best_entropy:
            best_entropy = entropy
            best_value = threshold
    return best_entropy, best_value


def gini_impurity(distribution: ClassDistribution) -> float:
    """Gini impurity ``1 - sum(p_i ** 2)`` of a class distribution."""
    total = sum(distribution.values())
    if total == 0:
        return 0.0
    return 1.0 - sum((count / total) ** 2 for count in distribution.values())


def average_gini_index(distribution: SplitDistribution) -> float:
    """Gini impurity of each branch, weighted by the branch's share of rows."""
    total = sum(sum(branch.values()) for branch in distribution.values())
    if total == 0:
        return 0.0
    return sum(
        sum(branch.values()) / total * gini_impurity(branch)
        for branch in distribution.values()
    )


def information_gain(
    distribution: ClassDistribution, split_distribution: SplitDistribution
) -> float:
    """Reduction in entropy achieved by a split."""
    return base_entropy(distribution) - split_entropy(split_distribution)


def information_gain_ratio(
    distribution: ClassDistribution, split_distribution: SplitDistribution
) -> float:
    """Information gain divided by the entropy remaining after the split."""
    remaining = split_entropy(split_distribution)
    gain = base_entropy(distribution) - remaining
    if remaining == 0:
        if gain > 0:
            return math.inf
        if gain < 0:
            return -math.inf
        return math.nan
    return gain / remaining