"""Tests for PlatformRegistry."""

import pytest

from pf_ruler.errors import UnknownPlatformError
from pf_ruler.platforms import (
    CodexAdapter,
    CursorAdapter,
    IPlatformAdapter,
    PlatformRegistry,
    TraeAdapter,
    default_registry,
)
from pf_ruler.rules.models import RuleSet


class _FakeAdapter(IPlatformAdapter):
    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    @property
    def name(self) -> str:
        return "trae"

    @property
    def default_output_path(self) -> str:
        return "fake.txt"

    def convert(self, rule_set: RuleSet) -> bytes:
        return self._payload


def test_get_registered_adapter() -> None:
    registry = PlatformRegistry()
    adapter = TraeAdapter()
    registry.register(adapter)
    assert registry.get("trae") == (adapter, True)


def test_get_unknown_adapter() -> None:
    assert PlatformRegistry().get("nope") == (None, False)


def test_last_registration_wins() -> None:
    registry = PlatformRegistry()
    registry.register(TraeAdapter())
    fake = _FakeAdapter(b"fake")
    registry.register(fake)
    adapter, found = registry.get("trae")
    assert found
    assert adapter is fake
    assert registry.list_supported() == ["trae"]


def test_require_unknown_raises_user_error() -> None:
    registry = default_registry()
    with pytest.raises(UnknownPlatformError) as excinfo:
        registry.require("vim")
    assert "vim" in str(excinfo.value)
    assert "trae" in str(excinfo.value)


def test_default_registry_contents() -> None:
    registry = default_registry()
    assert registry.list_supported() == ["codex", "cursor", "trae"]
    assert isinstance(registry.require("cursor"), CursorAdapter)
    assert isinstance(registry.require("codex"), CodexAdapter)
