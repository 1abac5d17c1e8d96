from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np

from .observations import Observation


logger = logging.getLogger(__name__)

Number = Union[int, float]


def _as_float(item: Union[Observation, Number]) -> float:
    return item.value if isinstance(item, Observation) else float(item)


@dataclass(frozen=True)
class Summary:
    count: int
    mean: float
    variance: float
    raw_moments: Dict[int, float] = field(default_factory=dict)


class StatisticValues:
    """Mean, variance, raw moments and empirical probability over one observation set.

    Every query over an empty set returns 0.0. Non-finite observations are
    accepted and propagate through the arithmetic. Not safe for concurrent
    ``load`` and queries on the same instance.
    """

    def __init__(self) -> None:
        self._values: np.ndarray = np.empty(0, dtype=np.float64)

    def load(self, observations: Optional[Iterable[Union[Observation, Number]]]) -> None:
        # None and empty both collapse to the empty set
        if observations is None:
            values = np.empty(0, dtype=np.float64)
        else:
            values = np.fromiter((_as_float(o) for o in observations), dtype=np.float64)
        self._values = values
        logger.debug("observation set loaded", extra={"count": int(values.size)})

    @property
    def count(self) -> int:
        return int(self._values.size)

    def raw_moment(self, order: int) -> float:
        """Return (1/N) * sum(x ** order), or 0.0 for an empty set."""
        if isinstance(order, bool) or int(order) != order or order < 1:
            raise ValueError(f"moment order must be a positive integer, got {order!r}")
        if self._values.size == 0:
            return 0.0
        with np.errstate(all="ignore"):
            return float(np.mean(self._values ** int(order)))

    def mean(self) -> float:
        return self.raw_moment(1)

    # Historical name for the first raw moment
    enumeration = mean

    def variance(self) -> float:
        """Population variance (N denominator), two-pass."""
        if self._values.size == 0:
            return 0.0
        with np.errstate(all="ignore"):
            centered = self._values - self.mean()
            return float(np.mean(centered * centered))

    def probability_of(self, event: Union[Observation, Number]) -> float:
        """Relative frequency of observations exactly equal to ``event``."""
        if self._values.size == 0:
            return 0.0
        target = _as_float(event)
        hits = int(np.count_nonzero(self._values == target))
        return hits / self._values.size

    def summary(self, orders: Sequence[int] = (1, 2, 3, 4)) -> Summary:
        return Summary(
            count=self.count,
            mean=self.mean(),
            variance=self.variance(),
            raw_moments={int(k): self.raw_moment(k) for k in orders},
        )
