"""Resource schema validation.

Provides standalone validation for resource schemas without requiring a
KeyEngine instance. Useful for CI pipelines and tooling that check
translation files before they are loaded.

Architecture:
    - validate_schema(): Main entry point, orchestrates validation passes
    - Pass 1: Structure - build the frozen schema, collecting SchemaError
    - _check_unreachable_keys(): Pass 2 - keys containing the key separator
    - _check_namespace_separator(): Pass 3 - top-level keys containing the
      namespace separator
    - _check_plural_groups(): Pass 4 - v4 plural groups without 'other',
      or plural suffixes under the v3 format

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from i18nkeys.constants import MAX_DEPTH, ORDINAL_MARKER, PLURAL_CATEGORIES
from i18nkeys.core.plural_suffix import plural_suffix, strip_plural_suffix
from i18nkeys.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    SchemaError,
    ValidationResult,
)
from i18nkeys.enums import JsonFormat
from i18nkeys.runtime.options import KeyOptions
from i18nkeys.schema.model import ResourceSchema, is_branch
from i18nkeys.types import Branch, Namespace

__all__ = ["validate_schema"]

logger = logging.getLogger(__name__)


def _display_path(namespace: Namespace, path: tuple[str, ...], options: KeyOptions) -> str:
    separator = options.key_separator if options.key_separator is not False else "."
    ns_separator = options.ns_separator if options.ns_separator is not False else ":"
    return f"{namespace}{ns_separator}{separator.join(path)}"


def _check_unreachable_keys(
    namespace: Namespace,
    branch: Branch,
    options: KeyOptions,
    path: tuple[str, ...] = (),
) -> list[Diagnostic]:
    """Find keys that contain the key separator.

    Such keys are stored but cannot be addressed: a lookup splits them into
    nested segments.
    """
    separator = options.key_separator
    if separator is False:
        return []
    warnings: list[Diagnostic] = []
    for key, child in branch.items():
        child_path = (*path, key)
        if separator in key:
            warnings.append(
                ErrorTemplate.schema_unreachable_key(
                    _display_path(namespace, child_path, options), separator
                )
            )
        if is_branch(child):
            warnings.extend(_check_unreachable_keys(namespace, child, options, child_path))
    return warnings


def _check_namespace_separator(
    namespace: Namespace, branch: Branch, options: KeyOptions
) -> list[Diagnostic]:
    """Find top-level keys that a lookup would parse as namespace-qualified."""
    separator = options.ns_separator
    if separator is False:
        return []
    return [
        ErrorTemplate.schema_ns_separator_in_key(
            _display_path(namespace, (key,), options), separator
        )
        for key in branch
        if separator in key
    ]


def _plural_group(key: str, options: KeyOptions) -> tuple[str, bool] | None:
    """Return (base, is_ordinal) for a plural-suffixed key."""
    base = strip_plural_suffix(key, options.plural_separator)
    if base is None:
        return None
    marker = f"{options.plural_separator}{ORDINAL_MARKER}{options.plural_separator}"
    return base, key[len(base) :].startswith(marker)


def _check_plural_groups(
    namespace: Namespace,
    branch: Branch,
    options: KeyOptions,
    path: tuple[str, ...] = (),
) -> list[Diagnostic]:
    """Check plural-suffixed leaves against the configured json format."""
    warnings: list[Diagnostic] = []
    groups: dict[tuple[str, bool], set[str]] = {}

    for key, child in branch.items():
        if is_branch(child):
            warnings.extend(_check_plural_groups(namespace, child, options, (*path, key)))
            continue
        group = _plural_group(key, options)
        if group is None:
            continue
        if options.json_format is JsonFormat.V3:
            warnings.append(
                ErrorTemplate.schema_plural_suffix_in_v3(
                    _display_path(namespace, (*path, key), options)
                )
            )
            continue
        groups.setdefault(group, set()).add(key)

    for (base, ordinal), members in sorted(groups.items()):
        other = base + plural_suffix(
            PLURAL_CATEGORIES[-1], options.plural_separator, ordinal=ordinal
        )
        if other not in members:
            label = base + (f"{options.plural_separator}{ORDINAL_MARKER}" if ordinal else "")
            warnings.append(
                ErrorTemplate.schema_plural_missing_other(
                    _display_path(namespace, (*path, label), options)
                )
            )
    return warnings


def validate_schema(
    data: ResourceSchema | Mapping[str, object],
    options: KeyOptions | None = None,
    *,
    max_depth: int = MAX_DEPTH,
) -> ValidationResult:
    """Validate a resource schema without constructing an engine.

    Structural problems that would make construction fail are errors.
    Keys that load fine but behave surprisingly at lookup time are warnings.

    Validation passes:
    1. Structure: non-mapping namespaces, unsupported values, invalid keys,
       cycles, excessive depth
    2. Unreachable keys: keys containing the key separator
    3. Namespace separator: top-level keys containing it
    4. Plural groups: v4 groups without an 'other' variant; v3 keys with
       CLDR plural suffixes

    Args:
        data: ResourceSchema or plain mapping of namespace -> tree
        options: Separators and json format (default: KeyOptions())
        max_depth: Maximum branch nesting depth

    Returns:
        ValidationResult with structural errors and warnings

    Example:
        >>> result = validate_schema({"translation": {"item_one": "{{count}} item"}})
        >>> result.is_valid
        True
        >>> [w.code.name for w in result.warnings]
        ['SCHEMA_PLURAL_MISSING_OTHER']
    """
    if options is None:
        options = KeyOptions()

    if isinstance(data, ResourceSchema):
        schema = data
    else:
        try:
            schema = ResourceSchema(data, max_depth=max_depth)
        except SchemaError as e:
            logger.error("Schema rejected: %s", e)
            diagnostic = e.diagnostic or Diagnostic(
                code=DiagnosticCode.SCHEMA_INVALID_NODE, message=str(e)
            )
            return ValidationResult(errors=(diagnostic,), warnings=())

    warnings: list[Diagnostic] = []
    for namespace in schema.namespaces:
        tree = schema.get(namespace)
        if tree is None:
            continue
        warnings.extend(_check_unreachable_keys(namespace, tree, options))
        warnings.extend(_check_namespace_separator(namespace, tree, options))
        warnings.extend(_check_plural_groups(namespace, tree, options))

    logger.debug("Validated schema: %d namespaces, %d warnings", len(schema), len(warnings))
    return ValidationResult(errors=(), warnings=tuple(warnings))
