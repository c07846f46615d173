from __future__ import annotations

from pf_ruler.constants import AGENTS_FILENAME
from pf_ruler.platforms.base import IPlatformAdapter
from pf_ruler.platforms.markdown import SECTION_HEADINGS
from pf_ruler.rules.models import RuleSet


class CodexAdapter(IPlatformAdapter):
    """Render the rule set as an AGENTS.md for Codex-style agents."""

    @property
    def name(self) -> str:
        return "codex"

    @property
    def default_output_path(self) -> str:
        return AGENTS_FILENAME

    def convert(self, rule_set: RuleSet) -> bytes:
        metadata = rule_set.metadata
        parts = [f"# {metadata.project_name}\n"]
        if metadata.tech_stacks:
            parts.append(f"技术栈: {', '.join(metadata.tech_stacks)}\n")

        for section, _ in rule_set.sections():
            rules = rule_set.enabled(section)
            if not rules:
                continue
            heading, _caveat = SECTION_HEADINGS[section]
            parts.append(f"## {heading}\n")
            for rule in rules:
                parts.append(f"### {rule.title}\n\n{rule.content}\n")

        parts.append(
            "## 使用说明\n\n"
            "规则按 项目 → 全局 → 模板 的顺序排列，前者优先。"
            "修改 `.ruler` 目录后运行 `pf-ruler generate --platform=codex` 重新生成。\n"
        )
        return "\n".join(parts).encode("utf-8")
