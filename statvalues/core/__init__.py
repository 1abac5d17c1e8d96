"""Core primitives: observations, width conversion and the statistics engine."""

from .engine import StatisticValues, Summary
from .observations import (
    Observation,
    Width,
    convert,
    from_double_array,
    from_float_array,
    from_int_array,
)

__all__ = [
    "Observation",
    "StatisticValues",
    "Summary",
    "Width",
    "convert",
    "from_double_array",
    "from_float_array",
    "from_int_array",
]
