# src/cfloss/losses/classification.py
"""
Probabilistic classification losses.

LogisticLoss works on a probability, CrossEntropyLoss and LogLoss work on a
raw score and use the softplus reformulation so that large scores never
overflow exp().
"""

from .base import Loss, LossKind, check_domain
from .utils import floored_log, softplus, softplus_grad, stable_sigmoid


def _check_binary_label(truth):
    check_domain(truth == 0.0 or truth == 1.0,
                 f"label must be 0 or 1, got {truth!r}")


class LogisticLoss(Loss):
    """
    logistic loss on a probability p:
        l(p, y) = -y log(p) - (1 - y) log(1 - p)
        d/dp l(p, y) = (p - y) / (p (1 - p))

    evaluate accepts p in [0, 1] and floors the log argument at LOG_FLOOR;
    gradient needs p strictly inside (0, 1).
    """

    loss_kind = LossKind.LOGISTIC

    def evaluate(self, pred, truth):
        check_domain(0.0 <= pred <= 1.0,
                     f"prediction must lie in [0, 1], got {pred!r}")
        _check_binary_label(truth)
        if truth == 0.0:
            return -floored_log(1.0 - pred)
        return -floored_log(pred)

    def gradient(self, pred, truth):
        check_domain(0.0 < pred < 1.0,
                     f"prediction must lie in (0, 1), got {pred!r}")
        _check_binary_label(truth)
        return float((pred - truth) / (pred * (1.0 - pred)))

    def predict(self, x):
        return float(x)


class CrossEntropyLoss(Loss):
    """
    cross entropy on a raw score a, with p = sigmoid(a):
        l(a, y) = -y log(p) - (1 - y) log(1 - p)
                = (1 - y) a + softplus(-a)
        d/da l(a, y) = sigmoid(a) - y

    y may be any soft label in [0, 1].
    """

    loss_kind = LossKind.CROSS_ENTROPY

    def evaluate(self, pred, truth):
        return float((1.0 - truth) * pred + softplus(-pred))

    def gradient(self, pred, truth):
        return float(softplus_grad(pred) - truth)

    def predict(self, x):
        return stable_sigmoid(x)


class LogLoss(Loss):
    """
    log loss on a margin z = a * y, y typically in {-1, +1}:
        l(a, y) = log(1 + exp(-z))
        dl/da = -y / (1 + exp(z))
    """

    loss_kind = LossKind.LOG

    def evaluate(self, pred, truth):
        z = float(pred) * float(truth)
        return softplus(-z)

    def gradient(self, pred, truth):
        z = float(pred) * float(truth)
        return -float(truth) * softplus_grad(-z)

    def predict(self, x):
        return float(x)
