# models and the mean primitive, kept free of configuration and i/o so it stays pure and testable

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np

# correctly rounded summation, not a numpy dtype
EXACT = "exact"
DEFAULT_ACCUMULATOR = "float64"

AccumulatorSpec = Union[str, type, np.dtype]


class InvalidArgument(ValueError):
    # single domain error: empty input or an unusable accumulator setting
    pass


@dataclass(frozen=True)
class SeriesMean:
    # output value object for one named series
    name: str
    mean: float
    count: int


# accepts "exact", dtype names ("float64", "f4", "longdouble") and numpy scalar types
def resolve_accumulator(accumulator: AccumulatorSpec) -> Union[str, np.dtype]:
    if isinstance(accumulator, str) and accumulator.strip().lower() == EXACT:
        return EXACT
    try:
        dtype = np.dtype(accumulator)
    except TypeError as exc:
        raise InvalidArgument(f"Unknown accumulator {accumulator!r}") from exc
    if dtype.kind != "f":
        raise InvalidArgument(f"Accumulator must be a floating-point type (got {dtype.name})")
    return dtype


def _check(index: int, value) -> None:
    # numbers.Real covers int, float, Fraction, bool and numpy int/float scalars
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Element {index} is not a real number: {value!r}")


def _sum(items, acc) -> float:
    if isinstance(acc, str):
        return math.fsum(items)
    # cumsum keeps a running accumulator in acc's precision, element after element
    return float(np.cumsum(np.asarray(items, dtype=acc))[-1])


def _scaled_mean(values: np.ndarray, acc) -> float:
    # the running sum overflowed although every element is finite: average in units of the largest magnitude
    scale = float(np.abs(values).max())
    scaled = values / scale
    return _sum(scaled if isinstance(acc, str) else scaled.astype(acc), acc) / len(values) * scale


# pure: same input and accumulator, same float; empty input raises InvalidArgument
def mean(values: Iterable[numbers.Real], accumulator: AccumulatorSpec = DEFAULT_ACCUMULATOR) -> float:
    acc = resolve_accumulator(accumulator)

    items = list(values)
    for i, v in enumerate(items):
        _check(i, v)
    n = len(items)
    if n == 0:
        raise InvalidArgument("Cannot compute the mean of an empty sequence")

    wide = np.asarray(items, dtype=np.float64)
    finite = bool(np.isfinite(wide).all())

    exact = isinstance(acc, str)
    with np.errstate(over="ignore", invalid="ignore"):
        if exact and not finite:
            # fsum rejects inf + -inf, IEEE addition gives nan
            result = float(np.add.reduce(wide)) / n
        else:
            try:
                total = _sum(items, acc)
            except OverflowError:
                total = math.inf
            result = total / n
            if finite and not math.isfinite(result):
                result = _scaled_mean(wide, acc)

    lo = float(wide.min())
    hi = float(wide.max())
    # rounding in the accumulator must never push the mean outside the data range
    return min(max(result, lo), hi)
