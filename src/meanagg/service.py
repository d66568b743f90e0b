# orchestration over named series
# parse_series checks payload shape, compute_all averages every series and orders the output
# the configured default accumulator is resolved here, never inside mean()

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .config import default_accumulator
from .models import AccumulatorSpec, SeriesMean, mean

logger = logging.getLogger(__name__)


# transform a decoded JSON payload into {name: values} and check shape
def parse_series(data) -> Dict[str, List[float]]:
    # current shape: {"series": [{"name": ..., "values": [...]}, ...]}
    if isinstance(data, dict):
        if "series" in data:
            try:
                pairs = [(str(item["name"]), list(item["values"])) for item in data["series"]]
            except (KeyError, TypeError):
                pairs = None  # fall through to the error below
            if pairs is not None:
                series = dict(pairs)
                # a repeated name would silently drop a series
                if len(series) == len(pairs):
                    return series

        # legacy shape: {name: [...], ...}
        elif data and all(isinstance(v, list) for v in data.values()):
            return {str(name): list(values) for name, values in data.items()}

    raise ValueError("Unsupported payload shape for parse_series()")


def average_series(name: str, values: Iterable, accumulator: Optional[AccumulatorSpec] = None) -> SeriesMean:
    if accumulator is None:
        accumulator = default_accumulator()
    items = list(values)
    result = SeriesMean(name=name, mean=mean(items, accumulator), count=len(items))
    logger.debug("series %r: n=%d mean=%r", name, result.count, result.mean)
    return result


def compute_all(series: Mapping[str, Iterable], accumulator: Optional[AccumulatorSpec] = None) -> List[SeriesMean]:
    if accumulator is None:
        # read once so every series in one call uses the same setting
        accumulator = default_accumulator()
    # errors from any series propagate; a partial result set is never returned
    results = [average_series(name, values, accumulator) for name, values in series.items()]

    # stable ordering keeps output deterministic
    return sorted(results, key=lambda r: r.name.lower())
