from pf_ruler.platforms.base import IPlatformAdapter, PlatformRegistry
from pf_ruler.platforms.codex import CodexAdapter
from pf_ruler.platforms.cursor import CursorAdapter
from pf_ruler.platforms.trae import TraeAdapter


def default_registry() -> PlatformRegistry:
    registry = PlatformRegistry()
    registry.register(TraeAdapter())
    registry.register(CursorAdapter())
    registry.register(CodexAdapter())
    return registry


__all__ = [
    "CodexAdapter",
    "CursorAdapter",
    "IPlatformAdapter",
    "PlatformRegistry",
    "TraeAdapter",
    "default_registry",
]
