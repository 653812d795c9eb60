"""
Numerically stable scalar utilities for loss computations
"""

from __future__ import annotations
# enable postponed evaluation of type annotations
import numpy as np

# beyond |x| > EXP_CUTOFF the softplus family switches to its asymptotic form
# exp(-18) ~ 1.5e-8, already below what matters to an optimizer step
EXP_CUTOFF = 18.0

# floor inside log(p) for probability-valued losses, keeps the loss finite at p in {0, 1}
LOG_FLOOR = 1e-4


# Core numerically stable ops

def stable_sigmoid(x: float) -> float:
    # Stable sigmoid, piecewise so exp is only ever taken of a non-positive argument
    # sigmoid(x) = 1 / (1 + exp(-x)) = exp(x) / (1 + exp(x))
    x = np.float64(x)
    if x >= 0:
        return float(1.0 / (1.0 + np.exp(-x)))
    ex = np.exp(x)
    return float(ex / (1.0 + ex))


def softplus(x: float) -> float:
    # softplus(x) = log(1 + exp(x))
    # x >> 0: log(1 + exp(x)) = x + log1p(exp(-x)) ~ x
    # x << 0: log1p(exp(x)) ~ exp(x)
    x = np.float64(x)
    if x > EXP_CUTOFF:
        return float(x)
    if x < -EXP_CUTOFF:
        return float(np.exp(x))
    return float(np.log1p(np.exp(x)))


def softplus_grad(x: float) -> float:
    # d/dx softplus(x) = sigmoid(x), with the same branches as softplus
    x = np.float64(x)
    if x > EXP_CUTOFF:
        return 1.0
    if x < -EXP_CUTOFF:
        return float(np.exp(x))
    return float(1.0 / (1.0 + np.exp(-x)))


def floored_log(p: float, floor: float = LOG_FLOOR) -> float:
    return float(np.log(max(floor, p)))
