"""Scalar helpers used by the distance bookkeeping."""

from __future__ import annotations


def maxf(x: float, y: float) -> float:
    return x if x > y else y


def minf(x: float, y: float) -> float:
    return y if x > y else x


def clamp(x: float, low: float, high: float) -> float:
    """Clamp *x* into the closed interval ``[low, high]``."""
    if x > high:
        return high
    if x < low:
        return low
    return x
