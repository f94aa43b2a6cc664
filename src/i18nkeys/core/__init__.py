"""Core utilities shared by the schema, analysis and runtime layers.

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp
from .plural_suffix import plural_suffix, strip_plural_suffix

__all__ = ["DepthGuard", "depth_clamp", "plural_suffix", "strip_plural_suffix"]
