"""Platform adapter contract and name-keyed registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pf_ruler.errors import UnknownPlatformError
from pf_ruler.rules.models import RuleSet


class IPlatformAdapter(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Stable lowercase platform identifier."""

    @property
    @abstractmethod
    def default_output_path(self) -> str:
        """Relative path the platform reads its rule file from."""

    @abstractmethod
    def convert(self, rule_set: RuleSet) -> bytes:
        """Render the full rule set in the platform's native format."""


class PlatformRegistry:
    def __init__(self) -> None:
        self._adapters: dict[str, IPlatformAdapter] = {}

    def register(self, adapter: IPlatformAdapter) -> None:
        self._adapters[adapter.name] = adapter

    def get(self, name: str) -> tuple[IPlatformAdapter | None, bool]:
        adapter = self._adapters.get(name)
        return adapter, adapter is not None

    def require(self, name: str) -> IPlatformAdapter:
        adapter, found = self.get(name)
        if not found or adapter is None:
            raise UnknownPlatformError(name, self.list_supported())
        return adapter

    def list_supported(self) -> list[str]:
        return sorted(self._adapters)

    def adapters(self) -> list[IPlatformAdapter]:
        return [self._adapters[name] for name in self.list_supported()]
