# src/cfloss/losses/base.py
from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass

import numpy as np


class DomainError(ValueError):
    """Raised when a loss receives an input outside the domain it is defined on.

    This is a precondition failure, not a recoverable condition: the caller
    handed the loss a value that would silently corrupt training.
    """


def check_domain(condition: bool, message: str) -> None:
    # NaN fails every comparison, so NaN inputs land here too
    if not condition:
        raise DomainError(message)


class LossKind(enum.IntEnum):
    SQUARE = 0
    LOGISTIC = 1
    LOG = 2
    HINGE = 3
    SQUARED_HINGE = 4
    CROSS_ENTROPY = 5

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    LossKind.SQUARE: "Square",
    LossKind.LOGISTIC: "Logistic",
    LossKind.LOG: "Log",
    LossKind.HINGE: "Hinge",
    LossKind.SQUARED_HINGE: "SquaredHinge",
    LossKind.CROSS_ENTROPY: "CrossEntropy",
}


def is_integer_tag(value) -> bool:
    # numpy integers count, bools never do even though True == 1
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


@dataclass(frozen=True)
class LossOut:
    value: float                   # loss for this (pred, truth) pair
    grad: float                    # d loss / d pred


# common interface for loss classes
class Loss:
    """
    Scalar loss over one (pred, truth) pair.

    Subclasses are stateless: every method is a pure function of its
    arguments, so a single instance can be shared between worker threads.
    """

    loss_kind: LossKind

    def kind(self) -> str:
        return self.loss_kind.display_name

    def evaluate(self, pred: float, truth: float) -> float:
        raise NotImplementedError

    def gradient(self, pred: float, truth: float) -> float:
        raise NotImplementedError

    def predict(self, x: float) -> float:
        raise NotImplementedError

    def value_and_grad(self, pred: float, truth: float) -> LossOut:
        return LossOut(value=self.evaluate(pred, truth), grad=self.gradient(pred, truth))

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"
