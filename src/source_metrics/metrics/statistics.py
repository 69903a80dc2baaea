"""Small numeric helpers for averages and length distributions."""

from typing import Sequence, Union

import numpy as np

from ..models import LengthDistribution

Number = Union[int, float]


def safe_ratio(numerator: Number, denominator: Number, digits: int = 2) -> float:
    """``numerator / denominator`` rounded, or 0.0 when the denominator is 0."""
    if denominator == 0:
        return 0.0
    return round(float(numerator) / denominator, digits)


def percentage(part: Number, whole: Number, digits: int = 2) -> float:
    """``part / whole * 100`` rounded, or 0.0 when ``whole`` is 0."""
    if whole == 0:
        return 0.0
    return round(float(part) / whole * 100, digits)


def length_distribution(lengths: Sequence[int]) -> LengthDistribution:
    """Summarize block lengths.

    Returns a zero-valued distribution for an empty sequence. The median is
    the element at ``n // 2`` of the sorted lengths.
    """
    if len(lengths) == 0:
        return LengthDistribution()

    values = np.sort(np.asarray(lengths, dtype=np.int64))
    return LengthDistribution(
        count=int(values.size),
        average=round(float(values.mean()), 2),
        minimum=int(values[0]),
        maximum=int(values[-1]),
        median=int(values[values.size // 2]),
    )
