# src/cfloss/losses/__init__.py
from .base import DomainError, Loss, LossKind, LossOut, check_domain
from .regression import SquareLoss
from .classification import CrossEntropyLoss, LogisticLoss, LogLoss
from .margin import HingeLoss, SquaredHingeLoss
from .factory import available_kinds, create, evaluate, gradient, kind_name, predict
from .config import get_loss, parse_kind

__all__ = [
    "DomainError", "Loss", "LossKind", "LossOut", "check_domain",
    "SquareLoss", "LogisticLoss", "CrossEntropyLoss", "LogLoss",
    "HingeLoss", "SquaredHingeLoss",
    "create", "available_kinds", "evaluate", "gradient", "predict", "kind_name",
    "get_loss", "parse_kind",
]
