"""Tests for interpolation placeholder extraction."""

from hypothesis import given

from i18nkeys.diagnostics import DiagnosticCode, MalformedInterpolationError
from i18nkeys.introspection import extract_parameters, scan_interpolation
from tests.strategies import interpolation_strings


def _codes(scan_problems: tuple[MalformedInterpolationError, ...]) -> list[DiagnosticCode]:
    return [p.diagnostic.code for p in scan_problems]  # type: ignore[union-attr]


class TestExtractParameters:
    """Test parameter name extraction."""

    def test_names_and_format_directive(self) -> None:
        """Text before the first comma is the parameter name."""
        assert extract_parameters("Hello {{name}}, you have {{count, number}} items") == {
            "name",
            "count",
        }

    def test_whitespace_trimmed(self) -> None:
        """Whitespace around names is ignored."""
        assert extract_parameters("{{ name }} {{ n , fmt, more }}") == {"name", "n"}

    def test_repeated_name_once(self) -> None:
        """Names form a set."""
        assert extract_parameters("{{a}} and {{a}}") == {"a"}

    def test_no_placeholders(self) -> None:
        """Plain text has no parameters."""
        assert extract_parameters("Just text") == frozenset()

    def test_non_string_values(self) -> None:
        """Sub-trees, arrays and None carry no parameters."""
        assert extract_parameters({"a": "{{x}}"}) == frozenset()
        assert extract_parameters(("{{x}}",)) == frozenset()
        assert extract_parameters(None) == frozenset()

    def test_custom_delimiters(self) -> None:
        """Configured prefix and suffix are honored."""
        assert extract_parameters("Hi %{name}!", "%{", "}") == {"name"}
        assert extract_parameters("Hi {{name}}", "%{", "}") == frozenset()

    def test_identical_delimiters(self) -> None:
        """Prefix and suffix may be the same token."""
        assert extract_parameters("Hi $name$ and $other$", "$", "$") == {"name", "other"}

    @given(interpolation_strings())
    def test_generated_strings(self, case: tuple[str, frozenset[str]]) -> None:
        """All non-overlapping placeholders are found."""
        value, names = case
        assert extract_parameters(value) == names


class TestScanInterpolation:
    """Test placeholder positions and malformed token reporting."""

    def test_positions(self) -> None:
        """Placeholders carry offsets and directives."""
        scan = scan_interpolation("a {{x, upper}} b")
        (placeholder,) = scan.placeholders
        assert placeholder.name == "x"
        assert placeholder.format == "upper"
        assert (placeholder.start, placeholder.end) == (2, 14)
        assert scan.problems == ()

    def test_unterminated_prefix(self) -> None:
        """An unterminated prefix is reported and the scan stops."""
        scan = scan_interpolation("Hi {{name")
        assert scan.parameters == frozenset()
        assert _codes(scan.problems) == [DiagnosticCode.MALFORMED_INTERPOLATION]
        assert scan.problems[0].is_warning

    def test_unterminated_then_valid(self) -> None:
        """A nested prefix restarts the scan at the inner token."""
        scan = scan_interpolation("{{broken {{name}} ok")
        assert scan.parameters == {"name"}
        assert _codes(scan.problems) == [DiagnosticCode.MALFORMED_INTERPOLATION]

    def test_stray_suffix(self) -> None:
        """A suffix without a prefix is reported; scanning continues."""
        scan = scan_interpolation("oops}} then {{x}}")
        assert scan.parameters == {"x"}
        assert _codes(scan.problems) == [DiagnosticCode.MALFORMED_INTERPOLATION]

    def test_empty_placeholder(self) -> None:
        """Empty names are reported, not returned."""
        scan = scan_interpolation("{{}} {{ , fmt}} {{ok}}")
        assert scan.parameters == {"ok"}
        assert _codes(scan.problems) == [
            DiagnosticCode.EMPTY_INTERPOLATION,
            DiagnosticCode.EMPTY_INTERPOLATION,
        ]
