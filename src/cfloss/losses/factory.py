# src/cfloss/losses/factory.py
"""
Construction entry point and the handle-style API used by the training loop.

Example:
    loss = create(LossKind.CROSS_ENTROPY)
    g = gradient(loss, loss.predict(score), label)
"""
import logging
from typing import List

from .base import Loss, LossKind, is_integer_tag
from .classification import CrossEntropyLoss, LogisticLoss, LogLoss
from .margin import HingeLoss, SquaredHingeLoss
from .regression import SquareLoss

logger = logging.getLogger(__name__)

_REGISTRY = {
    LossKind.SQUARE: SquareLoss,
    LossKind.LOGISTIC: LogisticLoss,
    LossKind.LOG: LogLoss,
    LossKind.HINGE: HingeLoss,
    LossKind.SQUARED_HINGE: SquaredHingeLoss,
    LossKind.CROSS_ENTROPY: CrossEntropyLoss,
}


def create(kind) -> Loss:
    """
    Build the loss registered for ``kind``.

    Args:
        kind: a LossKind member or its integer value (numpy integers included)

    Returns:
        A fresh, stateless Loss instance. Unknown tags fall back to SquareLoss
        instead of raising; the fallback is logged at warning level.
    """
    cls = None
    if is_integer_tag(kind):
        cls = _REGISTRY.get(int(kind))
    if cls is None:
        logger.warning("Unknown loss kind %r, falling back to %s", kind, LossKind.SQUARE.display_name)
        cls = SquareLoss
    loss = cls()
    logger.debug("Created %s loss", loss.kind())
    return loss


def available_kinds() -> List[str]:
    """Display names of every registered loss."""
    return [k.display_name for k in _REGISTRY]


def evaluate(handle: Loss, pred: float, truth: float) -> float:
    return handle.evaluate(pred, truth)


def gradient(handle: Loss, pred: float, truth: float) -> float:
    return handle.gradient(pred, truth)


def predict(handle: Loss, raw_score: float) -> float:
    return handle.predict(raw_score)


def kind_name(handle: Loss) -> str:
    return handle.kind()
