"""Distance metrics, PCA, activation functions, linear regression, naive Bayes and split criteria."""

__version__ = "0.1.0"

__all__ = [
    "activation",
    "linear_regression",
    "naive_bayes",
    "pairwise",
    "pca",
    "split_criteria",
    "utilities",
]