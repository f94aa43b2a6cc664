"""Validation utilities for resource schemas.

This module provides standalone validation functions for resource schemas,
separated from KeyEngine for better modularity and testability.

Python 3.13+.
"""

from i18nkeys.validation.schema import (
    validate_schema,
)

__all__ = [
    "validate_schema",
]
