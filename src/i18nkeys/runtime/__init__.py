"""Key resolution runtime.

Provides options, plural and context handling, namespace resolution, the
value resolver, and the KeyEngine API.

Python 3.13+.
"""

from i18nkeys.diagnostics import ValidationResult

from .context import append_context, filter_keys_by_context, strip_context
from .engine import KeyEngine, ScopedTranslator
from .namespaces import Candidate, parse_keys, resolve_candidates
from .options import KeyOptions, as_namespace_tuple
from .plural_rules import select_plural_category
from .request import DetailedResult, ResolutionRequest, ResolutionResult
from .resolver import ValueResolution, resolve_value

__all__ = [
    "Candidate",
    "DetailedResult",
    "KeyEngine",
    "KeyOptions",
    "ResolutionRequest",
    "ResolutionResult",
    "ScopedTranslator",
    "ValidationResult",
    "ValueResolution",
    "append_context",
    "as_namespace_tuple",
    "filter_keys_by_context",
    "parse_keys",
    "resolve_candidates",
    "resolve_value",
    "select_plural_category",
    "strip_context",
]
