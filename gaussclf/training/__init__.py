"""
Training (FINAL / FROZEN)

Paradigm: batch fit on a finite, labeled FeatureSource.

- One training run reads every label twice (mean pass, covariance pass)
- A run produces ONE immutable GaussianModel, or fails as a whole
- Models are never updated incrementally; re-run the job instead

On success a pipeline run produces an artifact directory:

model.json
    Per-label means, precisions, log coefficients, optional log priors.

artifact.json
    Run id, spec, metrics and the feature order inference must follow.
"""
