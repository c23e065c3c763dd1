#!filepath: gaussclf/cli.py
from typing import List, Optional

import typer
from rich import print

from gaussclf import __version__, init_logging
from gaussclf.utils.errors import (
    DimensionMismatchError,
    ModelArtifactError,
    TrainingError,
    UserInputError,
)

app = typer.Typer(help="Gaussian Classifier CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def train(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
    run_id: Optional[str] = typer.Option(None, "--run-id", help="artifact sub-directory name"),
):
    """
    训练模型并写出 artifact（model.json + artifact.json）
    """
    from gaussclf.config.app_config import AppConfig
    from gaussclf.training.pipeline import build_training_pipeline

    try:
        cfg = AppConfig.load(path=config)
    except FileNotFoundError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    init_logging(cfg.log)

    pipeline = build_training_pipeline(cfg.training)
    try:
        ctx = pipeline.run(run_id)
    except (TrainingError, UserInputError) as e:
        print(f"[red]Training failed: {e}[/red]")
        raise typer.Exit(code=1)

    print(f"[green]Artifact written to {ctx.model_artifact.path}[/green]")
    if "accuracy" in ctx.metrics:
        print(f"accuracy ({ctx.metrics['eval_split']}) = {ctx.metrics['accuracy']:.4f}")


@app.command()
def classify(
    artifact_dir: str,
    values: List[float] = typer.Argument(..., help="feature vector"),
):
    """
    对单个特征向量分类
    """
    from gaussclf.artifact.model_artifact import load_model_artifact
    from gaussclf.inference.gaussian_classifier import GaussianClassifier

    try:
        artifact = load_model_artifact(artifact_dir)
    except ModelArtifactError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    clf = GaussianClassifier(artifact.model, feature_order=artifact.feature_names)
    try:
        label = clf.classify(values)
        scores = clf.log_posteriors(values)
    except DimensionMismatchError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    print(f"label = {clf.label_name(label)}")
    for lbl, score in enumerate(scores):
        print(f"  {clf.label_name(lbl)}: {score:.6f}")


@app.command()
def inspect(artifact_dir: str):
    """
    打印 artifact 概要
    """
    from gaussclf.artifact.model_artifact import load_model_artifact

    try:
        artifact = load_model_artifact(artifact_dir)
    except ModelArtifactError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    model = artifact.model
    print(f"run_id   = {artifact.run_id}")
    print(f"spec     = {artifact.spec.family}/{artifact.spec.task}/{artifact.spec.version}")
    print(f"dim      = {model.dim}")
    print(f"features = {artifact.feature_names}")
    for lbl in range(model.label_count):
        prior = "-" if model.log_priors is None else f"{model.log_priors[lbl]:.6f}"
        print(
            f"  label {model.label_name(lbl)}: n={model.sample_counts[lbl]} "
            f"log_coef={model.log_coefs[lbl]:.6f} log_prior={prior}"
        )


if __name__ == "__main__":
    app()

# python -m gaussclf.cli train --config gaussclf/config/base.yml
