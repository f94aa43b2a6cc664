"""Introspection of resource values.

Placeholder extraction from resolved resource strings.

Python 3.13+. Zero external dependencies.
"""

from .interpolation import (
    InterpolationScan,
    PlaceholderInfo,
    extract_parameters,
    scan_interpolation,
)

__all__ = [
    "InterpolationScan",
    "PlaceholderInfo",
    "extract_parameters",
    "scan_interpolation",
]
