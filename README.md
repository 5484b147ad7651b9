# learnkit

A small machine-learning toolkit built on NumPy. It provides:

- **Pairwise distances and kernels** (`learnkit.pairwise`): `Chebyshev`,
  `Cosine` (with `dot`), `Cranberra`, `Euclidean` (with `inner_product`),
  `Manhattan`, `PolyKernel(degree)` and `RBFKernel(gamma)`. Inputs may be
  1-D vectors (treated as columns) or 2-D matrices; mismatched shapes raise
  `ValueError`.
- **Principal component analysis** (`learnkit.pca`): `PCA(num_components)`
  with `fit`, `transform` and `fit_transform`, computed through a thin
  singular value decomposition of the column-centred data. A
  `num_components` of 0, or one larger than the number of features, keeps
  every component. Also `column_mean` and `subtract_row_vector`.
- **Activation functions** (`learnkit.activation`): the `NeuralFunction`
  pair of `forward` and `backward` functions, and the ready-made `SIGMOID`,
  `LINEAR` and `SOFTPLUS_RECTIFIER`. They work element-wise on floats and
  NumPy arrays.
- **Linear regression** (`learnkit.linear_regression`): `LinearRegression`,
  ordinary least squares with an intercept, solved by QR decomposition.
  Fitting with fewer rows than coefficients raises `NotEnoughDataError`;
  predicting before fitting raises `NoTrainingDataError`.
- **Bernoulli naive Bayes** (`learnkit.naive_bayes`): `BernoulliNBClassifier`
  with Laplace smoothing. Any feature value greater than zero counts as
  present. Models can be written to and read from a JSON file with `save`
  and `load`.
- **Decision-tree split criteria** (`learnkit.split_criteria`):
  `base_entropy`, `split_entropy`, `information_gain`,
  `information_gain_ratio`, `gini_impurity`, `average_gini_index`, and
  `numeric_split_entropy`, which finds the threshold on a numeric attribute
  that minimises split entropy.
- **Helpers** (`learnkit.utilities`): `sort_int_map`, `floats_to_matrix`,
  `vector_to_matrix`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Distances between vectors:

```python
import numpy as np
from learnkit.pairwise import Euclidean, Manhattan

x = np.array([[1.0], [2.0], [3.0]])
y = np.array([[2.0], [4.0], [5.0]])

Euclidean().distance(x, y)   # 3.0
Manhattan().distance(x, y)   # 5.0
```

Reducing dimensionality:

```python
import numpy as np
from learnkit.pca import PCA

data = np.random.default_rng(0).random((10, 5))
reduced = PCA(2).fit_transform(data)   # shape (10, 2)
```

Fitting a linear regression:

```python
from learnkit.linear_regression import LinearRegression

model = LinearRegression()
model.fit([[1.0], [2.0], [3.0]], [2.0, 4.0, 6.0])
model.predict([[4.0]])   # about [8.0]
```

Classifying binary feature vectors:

```python
from learnkit.naive_bayes import BernoulliNBClassifier

nb = BernoulliNBClassifier()
nb.fit([[1, 1, 0], [1, 0, 1]], ["blue", "red"])
nb.predict_one([0, 1, 0])   # "blue"
nb.save("model.json")
```

Measuring a split:

```python
from learnkit.split_criteria import split_entropy

split_entropy({
    "sunny": {"play": 2, "noplay": 3},
    "overcast": {"play": 4},
    "rain": {"play": 3, "noplay": 2},
})   # about 0.694
```

## Errors

Functions that cannot work on their input raise `ValueError`. Using a model
before it has been fitted raises an error: `PCA.transform` and
`BernoulliNBClassifier.predict_one` raise `RuntimeError`, and
`LinearRegression.predict` raises `NoTrainingDataError`.

## What the package does not do

- There is no neural network. `learnkit.activation` supplies activation
  functions and their derivatives only; the package has no network of
  neurons, no layered model and no back-propagation training.
- There is no decision-tree classifier. `learnkit.split_criteria` computes
  the measures used to choose a split, but the package does not build,
  prune or predict with trees.
- There is no command-line program and no dataset loading; every function
  works on Python sequences and NumPy arrays that the caller supplies.