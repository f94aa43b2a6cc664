"""Static key analysis over resource schemas.

Python 3.13+.
"""

from .keys import KeySet, enumerate_key_prefixes, enumerate_keys, join_key

__all__ = ["KeySet", "enumerate_key_prefixes", "enumerate_keys", "join_key"]
