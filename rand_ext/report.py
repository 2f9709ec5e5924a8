"""Summary statistics for a batch of integer samples."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

HISTOGRAM_MAX_VALUES = 1000


@dataclass
class SampleSummary:
    count: int
    mean: Optional[float]
    stdev: Optional[float]
    observed_min: Optional[int]
    observed_max: Optional[int]
    lower_bound_hits: int
    upper_bound_hits: int
    histogram: Optional[Dict[int, int]] = field(default=None)

    @classmethod
    def from_samples(cls, samples: Iterable[int], minimum: int, maximum: int) -> "SampleSummary":
        values = list(samples)
        counts = Counter(values)

        histogram = None
        if maximum - minimum + 1 <= HISTOGRAM_MAX_VALUES:
            histogram = {value: counts.get(value, 0) for value in range(minimum, maximum + 1)}

        if not values:
            return cls(
                count=0,
                mean=None,
                stdev=None,
                observed_min=None,
                observed_max=None,
                lower_bound_hits=0,
                upper_bound_hits=0,
                histogram=histogram,
            )

        mean = math.fsum(values) / len(values)
        # population stdev
        variance = math.fsum((value - mean) ** 2 for value in values) / len(values)

        return cls(
            count=len(values),
            mean=mean,
            stdev=math.sqrt(variance),
            observed_min=min(values),
            observed_max=max(values),
            lower_bound_hits=counts.get(minimum, 0),
            upper_bound_hits=counts.get(maximum, 0),
            histogram=histogram,
        )
