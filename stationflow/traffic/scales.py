# stationflow/traffic/scales.py
from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Tuple

from stationflow.config import FILTERED_RADIUS_RANGE, FLOW_LEVELS, UNFILTERED_RADIUS_RANGE
from stationflow.traffic.types import CenteredAt, StationTraffic, Unfiltered


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale: circle area grows linearly with traffic.

    domain [0, domain_max] -> range (lo, hi). A zero domain maps to lo.
    """
    domain_max: float
    range_: Tuple[float, float]

    def __call__(self, value: float) -> float:
        lo, hi = self.range_
        if self.domain_max <= 0:
            return float(lo)
        t = math.sqrt(max(float(value), 0.0) / self.domain_max)
        return lo + (hi - lo) * t


def _radius_range(mode) -> Tuple[float, float]:
    if isinstance(mode, Unfiltered) or mode == "unfiltered":
        return UNFILTERED_RADIUS_RANGE
    if isinstance(mode, CenteredAt) or mode == "filtered":
        return FILTERED_RADIUS_RANGE
    raise ValueError(f"unknown radius mode: {mode!r}")


def radius_scale_for(
    traffic: Iterable[StationTraffic],
    mode,
    *,
    domain_max: float | None = None,
) -> RadiusScale:
    """
    mode: a filter state, or "unfiltered" / "filtered".

    domain_max defaults to the busiest station in traffic. Pass the all-day
    maximum to keep filtered circles on the same domain as the unfiltered map.
    """
    if domain_max is None:
        domain_max = max((t.total_traffic for t in traffic), default=0)
    return RadiusScale(domain_max=float(domain_max), range_=_radius_range(mode))


def quantize_flow(ratio: float) -> float:
    # [0, 1] split into len(FLOW_LEVELS) equal slices; edges go up a level
    n = len(FLOW_LEVELS)
    thresholds = [i / n for i in range(1, n)]
    return FLOW_LEVELS[bisect_right(thresholds, ratio)]


def flow_ratio_for(departures: int, total_traffic: int) -> float:
    return quantize_flow(departures / max(total_traffic, 1))
