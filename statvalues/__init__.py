"""Descriptive statistics over scalar numeric observations.

The engine computes the mean (enumeration), population variance, raw moments
of any order and the empirical probability of an exact value. Observations
come from integer, single- or double-precision arrays and are widened to
double precision on ingestion.
"""

__all__ = [
    "config",
    "core",
    "utils",
]
