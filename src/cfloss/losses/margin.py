# src/cfloss/losses/margin.py
from .base import Loss, LossKind

# margin at or below which a sample still contributes loss
MARGIN = 1.0


class HingeLoss(Loss):
    """
    hinge loss: l(a, y) = max(0, 1 - a y)
    """

    loss_kind = LossKind.HINGE

    def evaluate(self, pred, truth):
        z = float(pred) * float(truth)
        if z > MARGIN:
            return 0.0
        return float(1.0 - z)

    def gradient(self, pred, truth):
        z = float(pred) * float(truth)
        if z > MARGIN:
            return 0.0
        return -float(truth)

    def predict(self, x):
        return float(x)


class SquaredHingeLoss(Loss):
    """
    squared hinge loss: l(a, y) = 1/2 max(0, 1 - a y)^2
    dl/da = -y (1 - a y) inside the margin
    """

    loss_kind = LossKind.SQUARED_HINGE

    def evaluate(self, pred, truth):
        z = float(pred) * float(truth)
        if z > MARGIN:
            return 0.0
        d = 1.0 - z
        return float(0.5 * d * d)

    def gradient(self, pred, truth):
        z = float(pred) * float(truth)
        if z > MARGIN:
            return 0.0
        return -float(truth) * (1.0 - z)

    def predict(self, x):
        return float(x)
