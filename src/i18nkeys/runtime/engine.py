"""KeyEngine - main API for schema-checked translation key lookup.

Python 3.13+. External dependency: Babel (CLDR plural rules).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from i18nkeys.analysis.keys import KeySet, enumerate_key_prefixes
from i18nkeys.constants import DEFAULT_LOCALE, LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING
from i18nkeys.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    I18nKeyError,
    InvalidContextMatchError,
    KeyNotFoundError,
    ParameterNotProvidedError,
    ValidationResult,
)
from i18nkeys.enums import ValueShape
from i18nkeys.introspection import scan_interpolation
from i18nkeys.locale_utils import validate_locale_format
from i18nkeys.runtime.context import append_context
from i18nkeys.runtime.namespaces import Candidate, parse_keys, resolve_candidates
from i18nkeys.runtime.options import KeyOptions, as_namespace_tuple
from i18nkeys.runtime.plural_rules import select_plural_category
from i18nkeys.runtime.request import DetailedResult, ResolutionRequest, ResolutionResult
from i18nkeys.runtime.resolver import ValueResolution, resolve_value
from i18nkeys.schema.model import ResourceSchema
from i18nkeys.types import Branch, KeyPath, LocaleCode, Namespace, NamespaceSelector

__all__ = ["KeyEngine", "ScopedTranslator"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Snapshot:
    """Schema plus the key sets derived from it.

    Replaced as a whole by KeyEngine.replace_schema. Memo writes from
    concurrent readers are benign: every writer stores the same value.
    """

    schema: ResourceSchema
    key_sets: dict[tuple[object, ...], KeySet] = field(default_factory=dict)


def _coerce_schema(schema: ResourceSchema | Mapping[str, Any] | None) -> ResourceSchema:
    if schema is None:
        return ResourceSchema.absent()
    if isinstance(schema, ResourceSchema):
        return schema
    return ResourceSchema(schema)


class KeyEngine:
    """Resolve translation keys against a resource schema.

    The engine answers three questions for a lookup: which keys are valid,
    which value (and value shape) a key resolves to, and which interpolation
    parameters that value requires. Expected failures (missing keys,
    context mismatches, malformed placeholders, missing parameters) are
    returned in ``(result, errors)`` tuples and never raised.

    Thread Safety:
        Options and schema are immutable. Every call reads the current
        snapshot once, so replace_schema() is observed atomically by
        concurrent lookups and no locking is needed.

    Examples:
        >>> engine = KeyEngine({
        ...     "translation": {
        ...         "greeting": "Hello {{name}}",
        ...         "cart": {"item_one": "{{count}} item", "item_other": "{{count}} items"},
        ...     },
        ... })
        >>> engine.t("greeting", name="Anna")
        ('Hello {{name}}', ())
        >>> value, errors = engine.t("cart.item", count=3)
        >>> value
        '{{count}} items'
        >>> "cart.item" in engine.keys()
        True
    """

    __slots__ = ("_locale", "_options", "_snapshot")

    def __init__(
        self,
        schema: ResourceSchema | Mapping[str, Any] | None = None,
        options: KeyOptions | None = None,
        *,
        locale: LocaleCode = DEFAULT_LOCALE,
    ) -> None:
        """Initialize engine.

        Args:
            schema: ResourceSchema, or plain mapping of namespace -> tree.
                None selects the open mode where every key is accepted.
            options: Separators and behavior flags (default: KeyOptions())
            locale: Locale for plural rules and detailed results

        Raises:
            ValueError: If locale code is empty or has invalid format
            SchemaError: If a plain mapping schema is structurally invalid
        """
        validate_locale_format(locale)
        self._locale = locale
        self._options = options if options is not None else KeyOptions()
        self._snapshot = _Snapshot(_coerce_schema(schema))

        logger.info(
            "KeyEngine initialized for locale: %s (namespaces=%s, open=%s)",
            locale,
            list(self._snapshot.schema.namespaces),
            self._snapshot.schema.is_absent,
        )

    @property
    def locale(self) -> LocaleCode:
        """Locale code used for plural rules (read-only)."""
        return self._locale

    @property
    def options(self) -> KeyOptions:
        """Separator and behavior options (read-only)."""
        return self._options

    @property
    def schema(self) -> ResourceSchema:
        """Current resource schema snapshot (read-only)."""
        return self._snapshot.schema

    def __repr__(self) -> str:
        schema = self._snapshot.schema
        return (
            f"KeyEngine(locale={self._locale!r}, "
            f"namespaces={list(schema.namespaces)!r}, "
            f"open={schema.is_absent})"
        )

    def replace_schema(self, schema: ResourceSchema | Mapping[str, Any] | None) -> None:
        """Swap in a new schema.

        The new schema is fully constructed before the swap; lookups already
        in flight keep the snapshot they started with.

        Raises:
            SchemaError: If a plain mapping schema is structurally invalid
        """
        snapshot = _Snapshot(_coerce_schema(schema))
        self._snapshot = snapshot
        logger.info(
            "Schema replaced: namespaces=%s, open=%s",
            list(snapshot.schema.namespaces),
            snapshot.schema.is_absent,
        )

    def validate_schema(self) -> ValidationResult:
        """Run schema checks against the current schema and options."""
        from i18nkeys.validation import validate_schema  # noqa: PLC0415 - circular

        schema = self._snapshot.schema
        if schema.is_absent:
            return ValidationResult.valid()
        return validate_schema(
            {ns: schema.get(ns) for ns in schema.namespaces},
            self._options,
        )

    # ------------------------------------------------------------------
    # Key sets
    # ------------------------------------------------------------------

    def _namespaces(self, ns: NamespaceSelector | None) -> tuple[Namespace, ...]:
        return as_namespace_tuple(ns) or self._options.default_namespaces

    def _return_objects(self, override: bool | None) -> bool:
        return self._options.return_objects if override is None else override

    def keys(
        self,
        ns: NamespaceSelector | None = None,
        *,
        context: str | None = None,
        key_prefix: KeyPath | None = None,
        return_objects: bool | None = None,
    ) -> KeySet:
        """Caller-facing keys valid for a request scope.

        Args:
            ns: Namespace or namespace list (default: options.default_ns)
            context: Only keys carrying this context, with the token stripped
            key_prefix: Only keys under this prefix, with the prefix stripped
            return_objects: Include sub-tree keys (default: options flag)

        Returns:
            KeySet; open when the schema is absent
        """
        snapshot = self._snapshot
        namespaces = self._namespaces(ns)
        with_objects = self._return_objects(return_objects)
        memo_key = ("keys", namespaces, context, key_prefix, with_objects)
        cached = snapshot.key_sets.get(memo_key)
        if cached is None:
            cached = parse_keys(
                snapshot.schema,
                namespaces,
                self._options,
                key_prefix=key_prefix,
                context=context,
                with_return_objects=with_objects,
            )
            snapshot.key_sets[memo_key] = cached
        return cached

    def key_prefixes(self, ns: NamespaceSelector | None = None) -> KeySet:
        """Valid key-prefix scopes: the branch paths of the first namespace."""
        snapshot = self._snapshot
        namespace = self._namespaces(ns)[0]
        memo_key = ("prefixes", namespace)
        cached = snapshot.key_sets.get(memo_key)
        if cached is None:
            cached = enumerate_key_prefixes(snapshot.schema, namespace, self._options)
            snapshot.key_sets[memo_key] = cached
        return cached

    def is_valid_key(self, key: str, **scope: Any) -> bool:
        """Check a caller-facing key against keys(**scope)."""
        return key in self.keys(**scope)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(
        self, request: ResolutionRequest
    ) -> tuple[ResolutionResult | None, tuple[I18nKeyError, ...]]:
        """Resolve a request against the schema.

        Keys are tried in order and the first that resolves wins. Failures
        of earlier keys are not reported once a later key succeeds.

        Args:
            request: The lookup request

        Returns:
            Tuple of (result, errors)
            - result: ResolutionResult, or None if no key resolved
            - errors: KeyNotFoundError / InvalidContextMatchError on failure;
              MalformedInterpolationError warnings on success

        Raises:
            ValueError: If a key prefix is used while the key separator is
                disabled
        """
        snapshot = self._snapshot
        namespaces = self._namespaces(request.ns)
        return_objects = self._return_objects(request.return_objects)
        category = self._plural_category(request)

        errors: list[I18nKeyError] = []
        for key in request.keys:
            if not key or not isinstance(key, str):
                errors.append(KeyNotFoundError(ErrorTemplate.invalid_key()))
                continue
            result, key_errors = self._resolve_key(
                snapshot.schema, key, namespaces, request, category, return_objects
            )
            if result is not None:
                logger.debug(
                    "Resolved '%s' as %s in namespace '%s'",
                    key[:LOG_TRUNCATE_DEBUG],
                    result.exact_used_key[:LOG_TRUNCATE_DEBUG],
                    result.used_namespace,
                )
                return result, key_errors
            errors.extend(key_errors)
        return None, tuple(errors)

    def _plural_category(self, request: ResolutionRequest) -> str | None:
        if request.plural_category is not None:
            return request.plural_category
        if request.count is None:
            return None
        return select_plural_category(
            request.count, request.lng or self._locale, ordinal=request.ordinal
        )

    def _resolve_key(
        self,
        schema: ResourceSchema,
        key: str,
        namespaces: tuple[Namespace, ...],
        request: ResolutionRequest,
        category: str | None,
        return_objects: bool,
    ) -> tuple[ResolutionResult | None, tuple[I18nKeyError, ...]]:
        options = self._options
        candidates = resolve_candidates(key, namespaces, options, key_prefix=request.key_prefix)

        if schema.is_absent:
            first = candidates[0]
            return (
                ResolutionResult(
                    used_namespace=first.namespace,
                    used_key=key,
                    exact_used_key=append_context(
                        first.key, request.context, options.context_separator
                    ),
                    value=None,
                    shape=ValueShape.OPEN,
                    required_parameters=None,
                ),
                (),
            )

        fallback_error: KeyNotFoundError | None = None
        for candidate in candidates:
            tree = schema.get(candidate.namespace)
            if tree is None:
                continue
            lookup_key = append_context(candidate.key, request.context, options.context_separator)
            try:
                resolution = resolve_value(
                    tree,
                    lookup_key,
                    options,
                    plural_category=category,
                    return_objects=return_objects,
                    namespace=candidate.namespace,
                )
            except KeyNotFoundError as e:
                fallback_error = self._prefer_error(
                    fallback_error, e, tree, candidate, request, category
                )
                continue
            return self._build_result(key, candidate, resolution)

        if fallback_error is None:
            fallback_error = KeyNotFoundError(
                ErrorTemplate.key_not_found(
                    key,
                    namespaces[0],
                    tuple(c.qualified(options) for c in candidates),
                )
            )
        return None, (fallback_error,)

    def _prefer_error(
        self,
        current: KeyNotFoundError | None,
        error: KeyNotFoundError,
        tree: Branch,
        candidate: Candidate,
        request: ResolutionRequest,
        category: str | None,
    ) -> KeyNotFoundError | None:
        """Keep the most informative failure across candidates.

        A context mismatch (the bare key exists) or a disallowed sub-tree
        says more than a plain miss, and the first such failure wins.
        """
        if current is not None:
            return current
        diagnostic = error.diagnostic
        if diagnostic is not None and diagnostic.code is DiagnosticCode.OBJECT_NOT_ALLOWED:
            return error
        if request.context is not None:
            try:
                resolve_value(
                    tree,
                    candidate.key,
                    self._options,
                    plural_category=category,
                    return_objects=True,
                )
            except KeyNotFoundError:
                return None
            return InvalidContextMatchError(
                ErrorTemplate.context_not_matched(
                    candidate.key, request.context, candidate.namespace
                )
            )
        return None

    def _build_result(
        self, key: str, candidate: Candidate, resolution: ValueResolution
    ) -> tuple[ResolutionResult, tuple[I18nKeyError, ...]]:
        problems: tuple[I18nKeyError, ...] = ()
        parameters: frozenset[str] = frozenset()
        if isinstance(resolution.value, str):
            scan = scan_interpolation(
                resolution.value,
                self._options.interpolation_prefix,
                self._options.interpolation_suffix,
            )
            parameters = scan.parameters
            problems = scan.problems
        result = ResolutionResult(
            used_namespace=candidate.namespace,
            used_key=key,
            exact_used_key=resolution.exact_key,
            value=resolution.value,
            shape=resolution.shape,
            required_parameters=parameters,
        )
        return result, problems

    def required_parameters(
        self, key: str | Sequence[str], **options: Any
    ) -> tuple[frozenset[str] | None, tuple[I18nKeyError, ...]]:
        """Interpolation parameters the resolved value requires.

        Args:
            key: Key or key list
            **options: ResolutionRequest fields (ns, context, count, ...)

        Returns:
            Tuple of (parameter names, errors). Names are None when the
            lookup fails or is unconstrained (open mode); a failed lookup
            carries one error per requested key.

        Example:
            >>> engine.required_parameters("greeting")
            (frozenset({'name'}), ())
        """
        result, errors = self.resolve(ResolutionRequest.of(key, **options))
        if result is None:
            return None, errors
        return result.required_parameters, errors

    # ------------------------------------------------------------------
    # Lookup surface
    # ------------------------------------------------------------------

    def t(
        self,
        key: str | Sequence[str],
        /,
        default_value: str | None = None,
        *,
        ns: NamespaceSelector | None = None,
        context: str | None = None,
        count: int | float | Decimal | None = None,
        ordinal: bool = False,
        plural_category: str | None = None,
        return_objects: bool | None = None,
        return_details: bool = False,
        key_prefix: KeyPath | None = None,
        lng: LocaleCode | None = None,
        **params: Any,
    ) -> tuple[Any, tuple[I18nKeyError, ...]]:
        """Look up a key with fallback policy applied.

        On failure the value is None when options.return_null is set,
        otherwise default_value if given, otherwise the last requested key.
        Interpolation is not performed; missing parameters are reported as
        ParameterNotProvidedError warnings.

        Args:
            key: Key or key list [positional-only]
            default_value: Display fallback; positional or keyword
            ns: Namespace or namespace list
            context: Context token
            count: Count driving plural selection; counts as a supplied param
            ordinal: Use ordinal plural rules for count
            plural_category: Explicit CLDR category
            return_objects: Per-call return-objects override
            return_details: Return a DetailedResult instead of the bare value
            key_prefix: Key-prefix scope
            lng: Locale override for plural rules and used_lng
            **params: Interpolation parameters

        Returns:
            Tuple of (value, errors)

        Example:
            >>> value, errors = engine.t("missing", "Fallback")
            >>> value
            'Fallback'
            >>> errors[0].diagnostic.code.name
            'KEY_NOT_FOUND'
        """
        request = ResolutionRequest.of(
            key,
            ns=ns,
            key_prefix=key_prefix,
            context=context,
            count=count,
            plural_category=plural_category,
            ordinal=ordinal,
            return_objects=return_objects,
            return_details=return_details,
            lng=lng,
        )
        result, errors = self.resolve(request)
        used_lng = lng or self._locale

        if result is None:
            requested = request.keys[-1]
            logger.warning(
                "Key %s not found (%d error(s))",
                repr(requested)[:LOG_TRUNCATE_WARNING],
                len(errors),
            )
            if self._options.return_null:
                value: Any = None
            elif default_value is not None:
                value = default_value
            else:
                value = requested
            if return_details:
                used_params = dict(params)
                if count is not None:
                    used_params["count"] = count
                value = DetailedResult(
                    used_key=requested,
                    res=value,
                    exact_used_key=requested,
                    used_lng=used_lng,
                    used_ns=self._namespaces(ns)[0],
                    used_params=used_params,
                )
            return value, errors

        supplied = set(params)
        if count is not None:
            supplied.add("count")
        problems = list(errors)
        if result.required_parameters is not None:
            problems.extend(
                ParameterNotProvidedError(
                    ErrorTemplate.parameter_not_provided(name, result.used_key)
                )
                for name in sorted(result.required_parameters - supplied)
            )

        value = result.value
        if result.shape is ValueShape.OPEN:
            # No resources: display the default value or echo the key
            value = default_value if default_value is not None else result.used_key

        if not return_details:
            return value, tuple(problems)

        if result.required_parameters is None:
            used_params = dict(params)
        else:
            used_params = {
                name: params[name] for name in sorted(result.required_parameters) if name in params
            }
        if count is not None:
            used_params["count"] = count
        details = DetailedResult(
            used_key=result.used_key,
            res=value,
            exact_used_key=result.exact_used_key,
            used_lng=used_lng,
            used_ns=result.used_namespace,
            used_params=used_params,
        )
        return details, tuple(problems)

    def scoped(
        self, ns: NamespaceSelector | None = None, key_prefix: KeyPath | None = None
    ) -> ScopedTranslator:
        """Create a translator with a fixed namespace and key prefix.

        Raises:
            ValueError: If key_prefix is given while the key separator is
                disabled, or does not name a branch of the first namespace
                of a closed schema
        """
        if key_prefix is not None:
            if self._options.key_separator is False:
                msg = "key_prefix requires a key separator"
                raise ValueError(msg)
            if key_prefix not in self.key_prefixes(ns):
                msg = f"Invalid key prefix: '{key_prefix}'"
                raise ValueError(msg)
        return ScopedTranslator(self, as_namespace_tuple(ns) or None, key_prefix)


class ScopedTranslator:
    """Lookup surface bound to a namespace selection and key prefix.

    Per-call ``ns`` and ``key_prefix`` arguments override the bound ones.

    Example:
        >>> settings = engine.scoped(key_prefix="settings")
        >>> settings.t("theme")
        ('Dark', ())
    """

    __slots__ = ("_engine", "_key_prefix", "_ns")

    def __init__(
        self,
        engine: KeyEngine,
        ns: tuple[Namespace, ...] | None,
        key_prefix: KeyPath | None,
    ) -> None:
        self._engine = engine
        self._ns = ns
        self._key_prefix = key_prefix

    @property
    def namespaces(self) -> tuple[Namespace, ...] | None:
        """Bound namespaces, or None for the engine default."""
        return self._ns

    @property
    def key_prefix(self) -> KeyPath | None:
        """Bound key prefix."""
        return self._key_prefix

    def t(
        self, key: str | Sequence[str], /, default_value: str | None = None, **options: Any
    ) -> tuple[Any, tuple[I18nKeyError, ...]]:
        """Same as KeyEngine.t with the bound namespace and prefix."""
        options.setdefault("ns", self._ns)
        options.setdefault("key_prefix", self._key_prefix)
        return self._engine.t(key, default_value, **options)

    __call__ = t

    def keys(self, *, context: str | None = None, return_objects: bool | None = None) -> KeySet:
        """Caller-facing keys in this scope."""
        return self._engine.keys(
            self._ns,
            context=context,
            key_prefix=self._key_prefix,
            return_objects=return_objects,
        )

    def __repr__(self) -> str:
        return f"ScopedTranslator(ns={self._ns!r}, key_prefix={self._key_prefix!r})"
