"""Interpolation placeholder extraction.

Scans resource strings for delimiter-bounded placeholders such as
``{{name}}`` or ``{{count, number}}`` and reports the parameter names a
caller must supply. Text after the first comma inside a placeholder is a
formatting directive and is not part of the name.

Malformed placeholders never abort the scan: an unterminated prefix, a
stray suffix, or an empty placeholder is recorded as a warning and the
scan continues after it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nkeys.constants import DEFAULT_INTERPOLATION_PREFIX, DEFAULT_INTERPOLATION_SUFFIX
from i18nkeys.diagnostics import ErrorTemplate, MalformedInterpolationError

__all__ = [
    "InterpolationScan",
    "PlaceholderInfo",
    "extract_parameters",
    "scan_interpolation",
]


@dataclass(frozen=True, slots=True)
class PlaceholderInfo:
    """One placeholder found in a resource string."""

    name: str
    """Parameter name (text before the first comma, whitespace-trimmed)."""

    format: str | None
    """Formatting directive after the comma, if any."""

    start: int
    """Offset of the opening delimiter."""

    end: int
    """Offset just past the closing delimiter."""


@dataclass(frozen=True, slots=True)
class InterpolationScan:
    """Result of scanning one string.

    Attributes:
        placeholders: Well-formed placeholders in order of appearance
        problems: Warnings for malformed or empty placeholders
    """

    placeholders: tuple[PlaceholderInfo, ...]
    problems: tuple[MalformedInterpolationError, ...]

    @property
    def parameters(self) -> frozenset[str]:
        """Distinct parameter names."""
        return frozenset(p.name for p in self.placeholders)


def scan_interpolation(
    value: str,
    prefix: str = DEFAULT_INTERPOLATION_PREFIX,
    suffix: str = DEFAULT_INTERPOLATION_SUFFIX,
) -> InterpolationScan:
    """Scan a string for placeholders, reporting malformed ones.

    Args:
        value: Resource string
        prefix: Opening delimiter
        suffix: Closing delimiter

    Returns:
        InterpolationScan with placeholders and warnings

    Example:
        >>> scan = scan_interpolation("Hi {{name}}, {{count, number}} new")
        >>> sorted(scan.parameters)
        ['count', 'name']
        >>> scan_interpolation("Hi {{name").problems[0].diagnostic.code.name
        'MALFORMED_INTERPOLATION'
    """
    placeholders: list[PlaceholderInfo] = []
    problems: list[MalformedInterpolationError] = []
    distinct = prefix != suffix
    pos = 0

    while True:
        start = value.find(prefix, pos)

        if distinct:
            stray = value.find(suffix, pos)
            if stray != -1 and (start == -1 or stray < start):
                problems.append(
                    MalformedInterpolationError(
                        ErrorTemplate.malformed_interpolation(value, stray, suffix)
                    )
                )
                pos = stray + len(suffix)
                continue

        if start == -1:
            break

        inner_start = start + len(prefix)
        end = value.find(suffix, inner_start)
        if end == -1:
            problems.append(
                MalformedInterpolationError(
                    ErrorTemplate.malformed_interpolation(value, start, prefix)
                )
            )
            break

        if distinct:
            reopened = value.find(prefix, inner_start)
            if reopened != -1 and reopened < end:
                # Unterminated token; rescan from the inner prefix
                problems.append(
                    MalformedInterpolationError(
                        ErrorTemplate.malformed_interpolation(value, start, prefix)
                    )
                )
                pos = reopened
                continue

        name, comma, directive = value[inner_start:end].partition(",")
        name = name.strip()
        token_end = end + len(suffix)
        if name:
            placeholders.append(
                PlaceholderInfo(
                    name=name,
                    format=directive.strip() if comma else None,
                    start=start,
                    end=token_end,
                )
            )
        else:
            problems.append(
                MalformedInterpolationError(ErrorTemplate.empty_interpolation(start))
            )
        pos = token_end

    return InterpolationScan(placeholders=tuple(placeholders), problems=tuple(problems))


def extract_parameters(
    value: object,
    prefix: str = DEFAULT_INTERPOLATION_PREFIX,
    suffix: str = DEFAULT_INTERPOLATION_SUFFIX,
) -> frozenset[str]:
    """Return the set of parameter names a value requires.

    Non-string values (sub-trees, arrays, open-mode placeholders) carry no
    parameters.

    Example:
        >>> sorted(extract_parameters("Hello {{name}}, you have {{count, number}} items"))
        ['count', 'name']
        >>> extract_parameters({"nested": "{{x}}"})
        frozenset()
    """
    if not isinstance(value, str):
        return frozenset()
    return scan_interpolation(value, prefix, suffix).parameters
