"""Validation result for resource schema checks.

Consolidates structural errors (the schema cannot be constructed) and
warnings (the schema is usable but some keys behave surprisingly).

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable validation feedback for one schema.

    Attributes:
        errors: Structural errors; the schema would be rejected
        warnings: Informational findings; the schema is usable

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of structural errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            lines.extend(f"  [{e.code.name}]: {e.message}" for e in self.errors)

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            lines.extend(f"  [{w.code.name}]: {w.message}" for w in self.warnings)

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
