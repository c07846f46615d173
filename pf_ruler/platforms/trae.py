from __future__ import annotations

from datetime import datetime
from typing import Callable

from pf_ruler.platforms.base import IPlatformAdapter
from pf_ruler.platforms.markdown import full_document
from pf_ruler.rules.models import RuleSet


class TraeAdapter(IPlatformAdapter):
    """Render the rule set as Trae's project_rules.md."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "trae"

    @property
    def default_output_path(self) -> str:
        return ".trae/rules/project_rules.md"

    def convert(self, rule_set: RuleSet) -> bytes:
        return full_document(rule_set, self.name, self._clock()).encode("utf-8")
