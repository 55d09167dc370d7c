"""Tests for template variable → module resolution."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from promptline import modules
from promptline.config.models import CustomModuleConfig, DirectoryConfig
from promptline.modules import custom
from promptline.services.resolver import handle_module, should_add_implicit_custom_module
from tests.conftest import fake_computer, make_context, make_settings


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the directory collaborator and every custom module with fakes."""
    seen: list[str] = []
    monkeypatch.setitem(
        modules.MODULE_TABLE, "directory", fake_computer("directory", "~/src", calls=seen)
    )

    def fake_custom(module_id: str, context: object) -> object:
        return fake_computer(f"custom.{module_id}", module_id, calls=seen)(context)

    monkeypatch.setattr(custom, "module", fake_custom)
    return seen


class TestBuiltin:
    def test_enabled_builtin(self, calls: list[str]) -> None:
        resolved = handle_module("directory", make_context(), {"directory"})
        assert [m.name for m in resolved] == ["directory"]
        assert resolved[0].value() == "~/src"

    def test_disabled_builtin_is_empty(self, calls: list[str]) -> None:
        settings = make_settings(directory=DirectoryConfig(disabled=True))
        assert handle_module("directory", make_context(settings), {"directory"}) == []
        assert calls == []

    def test_duration_is_measured(self, calls: list[str]) -> None:
        (module,) = handle_module("directory", make_context(), {"directory"})
        assert module.duration.total_seconds() >= 0


class TestCustom:
    def _settings(self, **configs: CustomModuleConfig) -> object:
        return make_settings(custom=configs)

    def test_wildcard_includes_enabled_modules(self, calls: list[str]) -> None:
        settings = self._settings(a=CustomModuleConfig(), b=CustomModuleConfig())
        resolved = handle_module("custom", make_context(settings), {"custom"})
        assert [m.name for m in resolved] == ["custom.a", "custom.b"]

    def test_wildcard_skips_disabled(self, calls: list[str]) -> None:
        settings = self._settings(a=CustomModuleConfig(disabled=True), b=CustomModuleConfig())
        resolved = handle_module("custom", make_context(settings), {"custom"})
        assert [m.name for m in resolved] == ["custom.b"]

    def test_explicit_reference_is_not_duplicated(self, calls: list[str]) -> None:
        settings = self._settings(a=CustomModuleConfig(), b=CustomModuleConfig())
        variables = {"custom", "custom.a"}
        context = make_context(settings)
        implicit = handle_module("custom", context, variables)
        explicit = handle_module("custom.a", context, variables)
        assert [m.name for m in implicit] == ["custom.b"]
        assert [m.name for m in explicit] == ["custom.a"]
        assert calls.count("custom.a") == 1

    def test_wildcard_without_configuration(self, calls: list[str]) -> None:
        assert handle_module("custom", make_context(), {"custom"}) == []

    def test_explicit_disabled(self, calls: list[str]) -> None:
        settings = self._settings(a=CustomModuleConfig(disabled=True))
        assert handle_module("custom.a", make_context(settings), {"custom.a"}) == []
        assert calls == []

    def test_explicit_missing_logs_configured_ids(self, calls: list[str]) -> None:
        settings = self._settings(other=CustomModuleConfig())
        with capture_logs() as logs:
            assert handle_module("custom.a", make_context(settings), {"custom.a"}) == []
        assert logs[0]["module"] == "a"
        assert logs[0]["configured"] == ["other"]
        assert logs[0]["log_level"] == "debug"

    def test_explicit_missing_without_any_configuration(self, calls: list[str]) -> None:
        with capture_logs() as logs:
            assert handle_module("custom.a", make_context(), {"custom.a"}) == []
        assert logs[0]["module"] == "a"
        assert "configured" not in logs[0]


class TestUnknown:
    def test_unknown_name_is_empty_and_logged(self, calls: list[str]) -> None:
        with capture_logs() as logs:
            assert handle_module("dirctory", make_context(), {"dirctory"}) == []
        assert logs[0]["received"] == "dirctory"
        assert "directory" in logs[0]["expected"]
        assert calls == []


class TestShouldAddImplicit:
    def test_enabled_and_not_explicit(self) -> None:
        assert should_add_implicit_custom_module("a", CustomModuleConfig(), {"custom"})

    def test_explicit_wins(self) -> None:
        assert not should_add_implicit_custom_module("a", CustomModuleConfig(), {"custom.a"})

    def test_disabled(self) -> None:
        config = CustomModuleConfig(disabled=True)
        assert not should_add_implicit_custom_module("a", config, set())
