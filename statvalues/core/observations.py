from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

import numpy as np


@dataclass(frozen=True)
class Observation:
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


class Width(str, Enum):
    """Numeric width of the source array."""

    INT32 = "int"
    FLOAT32 = "float"
    FLOAT64 = "double"


# int32 data is exact in float64; wider or non-integral values are kept as given
_DTYPES: Dict[Width, type] = {
    Width.INT32: np.float64,
    Width.FLOAT32: np.float32,
    Width.FLOAT64: np.float64,
}


def convert(data: Optional[Iterable[float]], width: Width) -> Optional[List[Observation]]:
    """Convert a primitive array of the given width into observations.

    Values are cast to the source dtype first and then widened to float64, so
    a single-precision 3.14 becomes 3.140000104904175. ``None`` stays absent,
    an empty array gives an empty list. Nothing is validated: NaN, infinities
    and values outside the source range pass through (out-of-range
    single-precision values become infinite, as a float cast does).
    """
    if data is None:
        return None
    if not isinstance(data, np.ndarray):
        data = list(data)
    with np.errstate(over="ignore"):
        source = np.asarray(data, dtype=_DTYPES[Width(width)])
    if source.size == 0:
        return []
    widened = source.ravel().astype(np.float64)
    return [Observation(v) for v in widened.tolist()]


def from_int_array(data: Optional[Iterable[int]]) -> Optional[List[Observation]]:
    return convert(data, Width.INT32)


def from_float_array(data: Optional[Iterable[float]]) -> Optional[List[Observation]]:
    return convert(data, Width.FLOAT32)


def from_double_array(data: Optional[Iterable[float]]) -> Optional[List[Observation]]:
    return convert(data, Width.FLOAT64)
