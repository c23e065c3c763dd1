# gaussclf/utils/errors.py
from __future__ import annotations


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, columns, etc).
    Should NOT print traceback.
    """


class TrainingError(RuntimeError):
    """
    Base class of whole-model training failures.

    Training is fail-fast: when any label fails, no model is produced.
    """

    def __init__(self, label: int, message: str):
        super().__init__(f"label {label}: {message}")
        self.label = label


class EmptyLabelError(TrainingError):
    """A label has zero samples; its mean and covariance are undefined."""

    def __init__(self, label: int):
        super().__init__(label, "no samples")


class SingularCovarianceError(TrainingError):
    """A label's covariance matrix is singular or not positive-definite."""

    def __init__(self, label: int, n_samples: int):
        super().__init__(
            label,
            f"covariance is not positive-definite (n_samples={n_samples})",
        )
        self.n_samples = n_samples


class DimensionMismatchError(ValueError):
    """A feature vector length differs from the model dimensionality."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"feature vector has length {actual}, expected {expected}"
        )
        self.expected = expected
        self.actual = actual


class ModelArtifactError(RuntimeError):
    """Model artifact is missing or inconsistent."""


class PipelineAbort(RuntimeError):
    """A pipeline step cannot proceed."""
