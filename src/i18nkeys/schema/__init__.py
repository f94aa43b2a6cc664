"""Resource schema model.

Immutable namespace trees of string leaves, array leaves, and branches.

Python 3.13+.
"""

from .model import (
    ResourceSchema,
    freeze_namespace,
    is_array_leaf,
    is_branch,
    is_string_leaf,
)

__all__ = [
    "ResourceSchema",
    "freeze_namespace",
    "is_array_leaf",
    "is_branch",
    "is_string_leaf",
]
