"""Request and result records for key resolution.

ResolutionRequest is built per call and never mutated. ResolutionResult
and DetailedResult are returned to the caller, who owns them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from i18nkeys.constants import PLURAL_CATEGORIES
from i18nkeys.enums import ValueShape
from i18nkeys.runtime.options import as_namespace_tuple
from i18nkeys.types import KeyPath, LocaleCode, Namespace, NamespaceSelector, Node

__all__ = ["DetailedResult", "ResolutionRequest", "ResolutionResult"]


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """One lookup request.

    Attributes:
        keys: Keys to try in order; the first that resolves wins
        ns: Namespace or ordered namespace list; None uses the default
        key_prefix: Scope prepended to every key
        context: Context token appended to every key before lookup
        count: Count driving plural category selection
        plural_category: Explicit CLDR category; overrides count
        ordinal: Use ordinal rules when deriving the category from count
        return_objects: Per-call override of the return-objects option
        return_details: Ask the lookup layer for a DetailedResult
        lng: Locale for plural selection and result reporting

    Raises:
        ValueError: If no keys are given, or the plural category is unknown
        TypeError: If count is not a number

    Example:
        >>> request = ResolutionRequest.of("cart.items", count=3)
        >>> request.keys
        ('cart.items',)
    """

    keys: tuple[str, ...]
    ns: NamespaceSelector | None = None
    key_prefix: KeyPath | None = None
    context: str | None = None
    count: int | float | Decimal | None = None
    plural_category: str | None = None
    ordinal: bool = False
    return_objects: bool | None = None
    return_details: bool = False
    lng: LocaleCode | None = None

    def __post_init__(self) -> None:
        """Normalize keys and namespace selector, validate plural inputs."""
        keys = (self.keys,) if isinstance(self.keys, str) else tuple(self.keys)
        if not keys:
            msg = "At least one key is required"
            raise ValueError(msg)
        object.__setattr__(self, "keys", keys)

        if self.ns is not None:
            namespaces = as_namespace_tuple(self.ns)
            object.__setattr__(self, "ns", namespaces or None)

        if self.plural_category is not None and self.plural_category not in PLURAL_CATEGORIES:
            msg = f"Unknown plural category '{self.plural_category}'"
            raise ValueError(msg)

        if self.count is not None and (
            isinstance(self.count, bool) or not isinstance(self.count, (int, float, Decimal))
        ):
            msg = f"count must be a number, got {type(self.count).__name__}"
            raise TypeError(msg)

    @classmethod
    def of(cls, key: str | Sequence[str], **options: object) -> ResolutionRequest:
        """Build a request from a key or key list and keyword options."""
        keys = (key,) if isinstance(key, str) else tuple(key)
        return cls(keys, **options)  # type: ignore[arg-type]

    @property
    def namespaces(self) -> tuple[Namespace, ...]:
        """Requested namespaces as a tuple (empty when unspecified)."""
        return as_namespace_tuple(self.ns)


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Successful resolution of one request.

    Attributes:
        used_namespace: Namespace the value was found in
        used_key: Key as requested by the caller
        exact_used_key: Key path after prefix, context and plural expansion
        value: String, array (tuple), sub-tree (read-only mapping), or None
            in open mode
        shape: Shape of value
        required_parameters: Interpolation parameter names; None when
            unconstrained (open mode)
    """

    used_namespace: Namespace
    used_key: str
    exact_used_key: KeyPath
    value: Node | None
    shape: ValueShape
    required_parameters: frozenset[str] | None


@dataclass(frozen=True, slots=True)
class DetailedResult:
    """Lookup result with provenance, returned when return_details is set.

    Attributes:
        used_key: Plain key as requested
        res: The lookup result (value or fallback)
        exact_used_key: Key including context and plural suffix
        used_lng: Locale used for the lookup
        used_ns: Namespace the value came from
        used_params: Supplied values of the required parameters, plus count
    """

    used_key: str
    res: object
    exact_used_key: str
    used_lng: LocaleCode
    used_ns: Namespace
    used_params: Mapping[str, object] = field(default_factory=dict)
