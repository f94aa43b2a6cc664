"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def key_not_found(
        key: str, namespace: str | None = None, candidates: tuple[str, ...] = ()
    ) -> Diagnostic:
        """Key did not resolve in any candidate namespace.

        Args:
            key: The key as requested by the caller
            namespace: Primary namespace of the request
            candidates: Fully-qualified keys that were tried

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Key '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Check that the key exists in the resource schema",
            key=key,
            namespace=namespace,
            candidates=candidates or None,
        )

    @staticmethod
    def context_not_matched(key: str, context: str, namespace: str | None = None) -> Diagnostic:
        """Key exists, but no variant carries the requested context.

        Args:
            key: The key as requested by the caller
            context: The context token that was supplied
            namespace: Namespace where the bare key was found

        Returns:
            Diagnostic for CONTEXT_NOT_MATCHED
        """
        msg = f"Key '{key}' has no variant for context '{context}'"
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_NOT_MATCHED,
            message=msg,
            hint=f"Add a '{key}' variant suffixed with the '{context}' context",
            key=key,
            namespace=namespace,
        )

    @staticmethod
    def object_not_allowed(key: str, namespace: str | None = None) -> Diagnostic:
        """Key addresses a sub-tree while return-objects mode is off.

        Args:
            key: The resolved key path
            namespace: Namespace containing the sub-tree

        Returns:
            Diagnostic for OBJECT_NOT_ALLOWED
        """
        msg = f"Key '{key}' returned an object instead of a string"
        return Diagnostic(
            code=DiagnosticCode.OBJECT_NOT_ALLOWED,
            message=msg,
            hint="Request a leaf key or pass return_objects=True",
            key=key,
            namespace=namespace,
        )

    @staticmethod
    def invalid_key() -> Diagnostic:
        """Empty or non-string lookup key.

        Returns:
            Diagnostic for INVALID_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message="Invalid key: empty or non-string",
        )

    @staticmethod
    def malformed_interpolation(value: str, position: int, prefix: str) -> Diagnostic:
        """Unterminated interpolation prefix or stray suffix.

        Args:
            value: The resource string being scanned
            position: Character offset of the offending delimiter
            prefix: The delimiter that was left unbalanced

        Returns:
            Diagnostic for MALFORMED_INTERPOLATION (warning)
        """
        msg = f"Unbalanced interpolation delimiter '{prefix}' at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_INTERPOLATION,
            message=msg,
            hint=f"Check the placeholders in {value[:50]!r}",
            severity="warning",
        )

    @staticmethod
    def empty_interpolation(position: int) -> Diagnostic:
        """Placeholder without a parameter name.

        Args:
            position: Character offset of the placeholder

        Returns:
            Diagnostic for EMPTY_INTERPOLATION (warning)
        """
        msg = f"Empty interpolation placeholder at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INTERPOLATION,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def parameter_not_provided(name: str, key: str) -> Diagnostic:
        """Required interpolation parameter missing from the call.

        Args:
            name: Parameter name
            key: The key whose value requires the parameter

        Returns:
            Diagnostic for PARAMETER_NOT_PROVIDED (warning)
        """
        msg = f"Parameter '{name}' not provided for key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{name}' as a keyword argument",
            key=key,
            severity="warning",
        )

    @staticmethod
    def schema_invalid_key(path: str, found: str) -> Diagnostic:
        """Non-string (or empty) key inside a schema branch.

        Args:
            path: Path of the branch holding the key
            found: Type name of the offending key

        Returns:
            Diagnostic for SCHEMA_INVALID_KEY
        """
        msg = f"Schema keys must be non-empty strings, got {found} under '{path}'"
        return Diagnostic(code=DiagnosticCode.SCHEMA_INVALID_KEY, message=msg, key=path)

    @staticmethod
    def schema_invalid_node(path: str, found: str) -> Diagnostic:
        """Unsupported value type in a schema.

        Args:
            path: Path of the offending node
            found: Type name of the offending value

        Returns:
            Diagnostic for SCHEMA_INVALID_NODE
        """
        msg = f"Unsupported schema value of type {found} at '{path}'"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_INVALID_NODE,
            message=msg,
            hint="Values must be strings, lists of strings, or nested mappings",
            key=path,
        )

    @staticmethod
    def schema_cycle(path: str) -> Diagnostic:
        """Branch contains itself.

        Args:
            path: Path where the cycle closes

        Returns:
            Diagnostic for SCHEMA_CYCLE
        """
        msg = f"Schema branch at '{path}' contains itself"
        return Diagnostic(code=DiagnosticCode.SCHEMA_CYCLE, message=msg, key=path)

    @staticmethod
    def schema_depth_exceeded(max_depth: int) -> Diagnostic:
        """Schema nesting exceeds the maximum depth.

        Args:
            max_depth: The configured maximum depth

        Returns:
            Diagnostic for SCHEMA_DEPTH_EXCEEDED
        """
        msg = f"Maximum schema depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_DEPTH_EXCEEDED,
            message=msg,
            hint="Resource schemas are static trees; check for generated input",
        )

    @staticmethod
    def schema_unreachable_key(path: str, separator: str) -> Diagnostic:
        """Schema key contains the key separator and can never be addressed.

        Args:
            path: Path of the key
            separator: The configured key separator

        Returns:
            Diagnostic for SCHEMA_UNREACHABLE_KEY (warning)
        """
        msg = f"Key '{path}' contains the key separator '{separator}'"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_UNREACHABLE_KEY,
            message=msg,
            hint="Rename the key or disable the key separator",
            key=path,
            severity="warning",
        )

    @staticmethod
    def schema_ns_separator_in_key(path: str, separator: str) -> Diagnostic:
        """Top-level key contains the namespace separator.

        Args:
            path: Path of the key
            separator: The configured namespace separator

        Returns:
            Diagnostic for SCHEMA_NAMESPACE_SEPARATOR_IN_KEY (warning)
        """
        msg = f"Key '{path}' contains the namespace separator '{separator}'"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_NAMESPACE_SEPARATOR_IN_KEY,
            message=msg,
            hint="Lookups of this key will be parsed as namespace-qualified",
            key=path,
            severity="warning",
        )

    @staticmethod
    def schema_plural_missing_other(base: str) -> Diagnostic:
        """Plural group lacks its 'other' variant.

        Args:
            base: Base key of the plural group

        Returns:
            Diagnostic for SCHEMA_PLURAL_MISSING_OTHER (warning)
        """
        msg = f"Plural group '{base}' has no 'other' variant"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_PLURAL_MISSING_OTHER,
            message=msg,
            hint="Every CLDR locale selects 'other' for some counts",
            key=base,
            severity="warning",
        )

    @staticmethod
    def schema_plural_suffix_in_v3(path: str) -> Diagnostic:
        """CLDR plural suffix used while the v3 format is configured.

        Args:
            path: Path of the suffixed key

        Returns:
            Diagnostic for SCHEMA_PLURAL_SUFFIX_IN_V3 (warning)
        """
        msg = f"Key '{path}' uses a CLDR plural suffix but json_format is v3"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_PLURAL_SUFFIX_IN_V3,
            message=msg,
            hint="Set json_format='v4' to address the key by its base name",
            key=path,
            severity="warning",
        )
