[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnkit"
version = "0.1.0"
description = "Small machine-learning toolkit: distance metrics and kernels, PCA, activation functions, linear regression, Bernoulli naive Bayes and decision-tree split criteria."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "machine-learning",
    "pca",
    "naive-bayes",
    "linear-regression",
    "distance-metrics",
    "kernels",
    "entropy",
    "gini",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["learnkit"]

[tool.pytest.ini_options]
addopts = "-ra"
