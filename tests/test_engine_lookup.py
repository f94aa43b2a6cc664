"""Tests for the t() call surface, detailed results and scoped translators."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from i18nkeys import (
    DetailedResult,
    KeyEngine,
    KeyNotFoundError,
    KeyOptions,
    ParameterNotProvidedError,
    ScopedTranslator,
)
from i18nkeys.diagnostics import DiagnosticCode


@pytest.fixture
def engine(app_resources: dict[str, dict[str, object]]) -> KeyEngine:
    """Engine over the shared resources with default options."""
    return KeyEngine(app_resources)


class TestLookupValues:
    """Test plain t() values."""

    def test_string(self, engine: KeyEngine) -> None:
        """Resolved value returned; interpolation is not performed."""
        assert engine.t("greeting", name="Anna") == ("Hello {{name}}", ())

    def test_count_is_a_supplied_parameter(self, engine: KeyEngine) -> None:
        """count satisfies a {{count}} placeholder."""
        value, errors = engine.t("cart.item", count=3)
        assert value == "{{count}} items"
        assert errors == ()

    def test_missing_parameter_warning(self, engine: KeyEngine) -> None:
        """Missing parameters are reported, never raised."""
        value, errors = engine.t("greeting")
        assert value == "Hello {{name}}"
        (error,) = errors
        assert isinstance(error, ParameterNotProvidedError)
        assert error.is_warning
        assert error.diagnostic.code is DiagnosticCode.PARAMETER_NOT_PROVIDED  # type: ignore[union-attr]

    def test_context(self, engine: KeyEngine) -> None:
        """Context selects the variant."""
        assert engine.t("friend", context="male")[0] == "A boyfriend"
        assert engine.t("friend")[0] == "A friend"

    def test_ordinal(self, engine: KeyEngine) -> None:
        """Ordinal count selects the ordinal variant."""
        assert engine.t("place", count=3, ordinal=True)[0] == "{{count}}rd"

    def test_namespace_qualified(self, engine: KeyEngine) -> None:
        """Qualified keys and ns option."""
        assert engine.t("common:ok")[0] == "OK"
        assert engine.t("cancel", ns="common")[0] == "Cancel"

    def test_key_list(self, engine: KeyEngine) -> None:
        """First resolving key wins."""
        assert engine.t(["missing.one", "farewell"]) == ("Goodbye", ())

    def test_return_objects(self, engine: KeyEngine) -> None:
        """Sub-trees are returned on request."""
        value, errors = engine.t("settings", return_objects=True)
        assert errors == ()
        assert dict(value) == {"theme": "Dark", "language": "Language: {{lng, uppercase}}"}

    def test_array(self, engine: KeyEngine) -> None:
        """Arrays are returned as tuples."""
        assert engine.t("weekdays") == (("Mon", "Tue", "Wed"), ())


class TestFallbackPolicy:
    """Test value on failure: null, default value, key echo."""

    def test_key_echo(self, engine: KeyEngine) -> None:
        """Without a default the requested key is returned."""
        value, errors = engine.t("missing")
        assert value == "missing"
        assert isinstance(errors[0], KeyNotFoundError)

    def test_default_value(self, engine: KeyEngine) -> None:
        """Positional default value is used on failure."""
        value, errors = engine.t("missing", "Fallback")
        assert value == "Fallback"
        assert errors[0].diagnostic.code is DiagnosticCode.KEY_NOT_FOUND  # type: ignore[union-attr]

    def test_default_value_keyword(self, engine: KeyEngine) -> None:
        """default_value passed by keyword is the fallback, not a parameter."""
        value, errors = engine.t("missing", default_value="Fallback")
        assert value == "Fallback"
        assert errors[0].diagnostic.code is DiagnosticCode.KEY_NOT_FOUND  # type: ignore[union-attr]

    def test_default_value_keyword_open_mode(self) -> None:
        """Without a schema the keyword default is displayed."""
        assert KeyEngine().t("anything", default_value="Shown") == ("Shown", ())

    def test_default_value_ignored_on_success(self, engine: KeyEngine) -> None:
        """A default does not replace a resolved value."""
        assert engine.t("farewell", "Fallback")[0] == "Goodbye"

    def test_return_null(self, app_resources: dict[str, dict[str, object]]) -> None:
        """return_null yields None even with a default value."""
        engine = KeyEngine(app_resources, KeyOptions(return_null=True))
        value, errors = engine.t("missing", "Fallback")
        assert value is None
        assert len(errors) == 1

    def test_key_list_echoes_last_key(self, engine: KeyEngine) -> None:
        """The last requested key is echoed."""
        value, errors = engine.t(["first.missing", "second.missing"])
        assert value == "second.missing"
        assert len(errors) == 2

    def test_branch_without_return_objects(self, engine: KeyEngine) -> None:
        """A sub-tree lookup without return_objects falls back."""
        value, errors = engine.t("settings")
        assert value == "settings"
        assert errors[0].diagnostic.code is DiagnosticCode.OBJECT_NOT_ALLOWED  # type: ignore[union-attr]

    def test_failure_logged(self, engine: KeyEngine, caplog: Any) -> None:
        """Failed lookups are logged at WARNING."""
        with caplog.at_level(logging.WARNING, logger="i18nkeys.runtime.engine"):
            engine.t("definitely.missing")
        assert any("definitely.missing" in r.message for r in caplog.records)

    def test_open_mode_echoes_key(self) -> None:
        """Without resources the key (or default) is displayed."""
        engine = KeyEngine()
        assert engine.t("any.key", name="x") == ("any.key", ())
        assert engine.t("any.key", "Shown") == ("Shown", ())


class TestRequestValidation:
    """Test request argument validation."""

    def test_unknown_plural_category(self, engine: KeyEngine) -> None:
        """Category must be a CLDR name."""
        with pytest.raises(ValueError, match="Unknown plural category"):
            engine.t("cart.item", plural_category="several")

    def test_non_numeric_count(self, engine: KeyEngine) -> None:
        """count must be a number."""
        with pytest.raises(TypeError, match="count must be a number"):
            engine.t("cart.item", count="3")  # type: ignore[arg-type]

    def test_bool_count_rejected(self, engine: KeyEngine) -> None:
        """Booleans are not counts."""
        with pytest.raises(TypeError):
            engine.t("cart.item", count=True)

    def test_empty_key_list(self, engine: KeyEngine) -> None:
        """At least one key is required."""
        with pytest.raises(ValueError, match="At least one key"):
            engine.t([])

    def test_prefix_without_key_separator(
        self, app_resources: dict[str, dict[str, object]]
    ) -> None:
        """A prefix needs nested keys."""
        engine = KeyEngine(app_resources, KeyOptions(key_separator=False))
        with pytest.raises(ValueError):
            engine.t("theme", key_prefix="settings")


class TestDetailedResult:
    """Test return_details."""

    def test_default_value_keyword_not_in_used_params(self, engine: KeyEngine) -> None:
        """A keyword default_value is not reported as an interpolation parameter."""
        details, _ = engine.t("missing", default_value="Fallback", return_details=True)
        assert details.res == "Fallback"
        assert details.used_params == {}

    def test_success(self, engine: KeyEngine) -> None:
        """All provenance fields are populated."""
        details, errors = engine.t("greeting", return_details=True, name="Anna", extra=1)
        assert errors == ()
        assert details == DetailedResult(
            used_key="greeting",
            res="Hello {{name}}",
            exact_used_key="greeting",
            used_lng="en",
            used_ns="translation",
            used_params={"name": "Anna"},
        )

    def test_plural_and_count(self, engine: KeyEngine) -> None:
        """Exact key includes the plural suffix; count is in used_params."""
        details, _ = engine.t("cart.item", count=1, return_details=True)
        assert details.exact_used_key == "cart.item_one"
        assert details.used_params == {"count": 1}

    def test_context_exact_key(self, engine: KeyEngine) -> None:
        """Exact key includes the context token."""
        details, _ = engine.t("friend", context="female", return_details=True)
        assert details.used_key == "friend"
        assert details.exact_used_key == "friend_female"

    def test_fallback_namespace(self) -> None:
        """used_ns names the namespace the value came from."""
        engine = KeyEngine(
            {"a": {}, "b": {"x": "X"}}, KeyOptions(default_ns="a", fallback_ns="b")
        )
        details, _ = engine.t("x", ns=["a"], return_details=True)
        assert details.used_ns == "b"
        assert details.res == "X"

    def test_lng(self, engine: KeyEngine) -> None:
        """used_lng follows the lng override."""
        details, _ = engine.t("farewell", return_details=True, lng="de")
        assert details.used_lng == "de"

    def test_failure(self, engine: KeyEngine) -> None:
        """Failures are wrapped too, with the fallback value as res."""
        details, errors = engine.t("missing", "Fallback", return_details=True, count=2)
        assert isinstance(details, DetailedResult)
        assert details.res == "Fallback"
        assert details.used_key == "missing"
        assert details.used_ns == "translation"
        assert details.used_params == {"count": 2}
        assert len(errors) == 1


class TestScopedTranslator:
    """Test fixed-namespace, fixed-prefix translators."""

    def test_prefix(self, engine: KeyEngine) -> None:
        """Keys are resolved under the bound prefix."""
        settings = engine.scoped(key_prefix="settings")
        assert isinstance(settings, ScopedTranslator)
        assert settings.t("theme") == ("Dark", ())
        assert settings("theme") == engine.t("settings.theme")

    def test_namespace(self, engine: KeyEngine) -> None:
        """Keys are resolved in the bound namespace."""
        common = engine.scoped("common")
        assert common.t("ok")[0] == "OK"
        assert common.namespaces == ("common",)

    def test_per_call_override(self, engine: KeyEngine) -> None:
        """Per-call ns overrides the bound namespace."""
        common = engine.scoped("common")
        assert common.t("farewell", ns="translation")[0] == "Goodbye"

    def test_default_value_keyword(self, engine: KeyEngine) -> None:
        """Scoped lookups accept default_value by keyword."""
        settings = engine.scoped(key_prefix="settings")
        assert settings.t("missing", default_value="Fallback")[0] == "Fallback"
        assert settings("missing", "Fallback")[0] == "Fallback"

    def test_keys(self, engine: KeyEngine) -> None:
        """Key set of the scope."""
        keys = engine.scoped(key_prefix="settings").keys()
        assert set(keys) == {"theme", "language", "translation:theme", "translation:language"}

    def test_invalid_prefix(self, engine: KeyEngine) -> None:
        """Prefixes must name a branch of a closed schema."""
        with pytest.raises(ValueError, match="Invalid key prefix"):
            engine.scoped(key_prefix="greeting")

    def test_open_mode_accepts_any_prefix(self) -> None:
        """Any prefix is valid without a schema."""
        assert KeyEngine().scoped(key_prefix="anything").key_prefix == "anything"

    def test_prefix_without_key_separator(self) -> None:
        """Scoping needs a key separator."""
        with pytest.raises(ValueError, match="key separator"):
            KeyEngine(options=KeyOptions(key_separator=False)).scoped(key_prefix="x")

    def test_repr(self) -> None:
        """repr shows the bindings."""
        assert repr(KeyEngine().scoped("common", "x")) == (
            "ScopedTranslator(ns=('common',), key_prefix='x')"
        )
