from __future__ import annotations

from datetime import datetime
from typing import Callable

import yaml

from pf_ruler.platforms.base import IPlatformAdapter
from pf_ruler.platforms.markdown import full_document
from pf_ruler.rules.models import RuleSet


class CursorAdapter(IPlatformAdapter):
    """Render the rule set as a Cursor .mdc rule with camelCase frontmatter."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "cursor"

    @property
    def default_output_path(self) -> str:
        return ".cursor/rules/project_rules.mdc"

    def convert(self, rule_set: RuleSet) -> bytes:
        fm = {
            "description": f"{rule_set.metadata.project_name} 项目规则集",
            "alwaysApply": True,
        }
        parts: list[str] = []
        parts.append("---")
        parts.append(
            yaml.dump(
                fm, default_flow_style=False, sort_keys=False, allow_unicode=True
            ).rstrip()
        )
        parts.append("---")
        parts.append("")
        parts.append(full_document(rule_set, self.name, self._clock()))
        return "\n".join(parts).encode("utf-8")
