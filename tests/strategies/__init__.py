"""Hypothesis strategies for i18nkeys property-based testing.

Strategies are organized by domain:

- schema: key segments, resource trees, context tokens, placeholders

Usage:
    from tests.strategies import flat_trees, nested_trees, key_segments
"""

from .schema import (
    KEY_ALPHABET,
    context_tokens,
    dotted_key_segments,
    flat_trees,
    interpolation_strings,
    key_segments,
    nested_trees,
    parameter_names,
)

__all__ = [
    "KEY_ALPHABET",
    "context_tokens",
    "dotted_key_segments",
    "flat_trees",
    "interpolation_strings",
    "key_segments",
    "nested_trees",
    "parameter_names",
]
