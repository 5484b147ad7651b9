"""Bernoulli naive Bayes classification."""

from __future__ import annotations

import json
import math
import os
from collections.abc import Iterable, Sequence

__all__ = ["BernoulliNBClassifier"]


class BernoulliNBClassifier:
    """Naive Bayes over boolean features.

    Any value greater than zero counts as the feature being present. The
    likelihood of a document given class C is the product over features of
    ``p(f|C)`` when present and ``1 - p(f|C)`` when absent, with Laplace
    smoothing applied to the conditional probabilities.
    """

    def __init__(self) -> None:
        self.cond_prob: dict[str, list[float]] = {}
        self.class_instances: dict[str, int] = {}
        self.training_instances = 0
        self.features = 0

    def fit(self, rows: Iterable[Sequence[float]], classes: Iterable[str]) -> None:
        """Train on feature ``rows`` labelled by the matching ``classes``."""
        data = [list(row) for row in rows]
        labels = [str(c) for c in classes]
        if len(data) != len(labels):
            raise ValueError("rows and classes must have the same length")
        if not data:
            raise ValueError("at least one training row is required")
        features = len(data[0])
        if any(len(row) != features for row in data):
            raise ValueError("all rows must have the same number of features")

        class_instances: dict[str, int] = {}
        docs_containing: dict[str, list[int]] = {}
        for row, label in zip(data, labels):
            class_instances[label] = class_instances.get(label, 0) + 1
            counts = docs_containing.setdefault(label, [0] * features)
            for feat, value in enumerate(row):
                if value > 0:
                    counts[feat] += 1

        self.training_instances = len(data)
        self.features = features
        self.class_instances = class_instances
        self.cond_prob = {
            label: [
                (num_docs + 1) / (class_instances[label] + 1)
                for num_docs in docs_containing[label]
            ]
            for label in class_instances
        }

    def predict_one(self, vector: Sequence[float]) -> str:
        """Return the class scoring highest for a single feature vector."""
        if self.features == 0:
            raise RuntimeError("fit should be called before predicting")
        if len(vector) != self.features:
            raise ValueError("different dimensions in train and test sets")

        best_score = -math.inf
        best_class = ""
        for label, count in self.class_instances.items():
            score = math.log(count / self.training_instances)
            for value, prob in zip(vector, self.cond_prob[label]):
                if value > 0:
                    score += math.log(prob)
                elif prob == 1.0:
                    score += math.log(1.0 / (count + 1))
                else:
                    score += math.log(1.0 - prob)
            if score > best_score:
                best_score = score
                best_class = label
        return best_class

    def predict(self, rows: Iterable[Sequence[float]]) -> list[str]:
        """Return the predicted class of every row."""
        return [self.predict_one(row) for row in rows]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the trained model to ``path`` as JSON."""
        state = {
            "num_features": self.features,
            "num_training_instances": self.training_instances,
            "class_instances": self.class_instances,
            "cond_map": self.cond_prob,
        }
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(state, handle)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read a model previously written by :meth:`save`."""
        with open(path, encoding="utf-8") as handle:
            state = json.load(handle)
        try:
            features = int(state["num_features"])
            training = int(state["num_training_instances"])
            class_instances = {str(k): int(v) for k, v in state["class_instances"].items()}
            cond_prob = {
                str(k): [float(p) for p in v] for k, v in state["cond_map"].items()
            }
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise ValueError(f"unable to read model from {path}") from exc
        self.features = features
        self.training_instances = training
        self.class_instances = class_instances
        self.cond_prob = cond_prob