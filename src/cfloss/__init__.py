"""
cfloss: scalar loss functions for gradient-based training.

Each loss maps one (pred, truth) pair to a loss value and its derivative
with respect to pred, plus the link transform from a raw model score.
"""
import logging

from .losses import (
    CrossEntropyLoss,
    DomainError,
    HingeLoss,
    LogisticLoss,
    LogLoss,
    Loss,
    LossKind,
    LossOut,
    SquaredHingeLoss,
    SquareLoss,
    available_kinds,
    create,
    evaluate,
    get_loss,
    gradient,
    kind_name,
    parse_kind,
    predict,
)

# library: leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Loss", "LossKind", "LossOut", "DomainError",
    "SquareLoss", "LogisticLoss", "CrossEntropyLoss", "LogLoss",
    "HingeLoss", "SquaredHingeLoss",
    "create", "available_kinds", "evaluate", "gradient", "predict", "kind_name",
    "get_loss", "parse_kind",
]
