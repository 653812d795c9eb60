# src/cfloss/losses/regression.py
from .base import Loss, LossKind


class SquareLoss(Loss):
    """
    square loss: l(a, y) = (y - a)^2
    """

    loss_kind = LossKind.SQUARE

    def evaluate(self, pred, truth):
        err = float(truth) - float(pred)
        return float(err * err)

    def gradient(self, pred, truth):
        return -2.0 * (float(truth) - float(pred))

    def predict(self, x):
        return float(x)
