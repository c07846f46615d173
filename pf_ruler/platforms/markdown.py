"""Markdown building blocks shared by the markdown-based adapters."""

from __future__ import annotations

from datetime import datetime
from typing import Final

from pf_ruler.constants import TIMESTAMP_FORMAT
from pf_ruler.rules.models import Metadata, Rule, RuleSection, RuleSet


SECTION_HEADINGS: Final[dict[RuleSection, tuple[str, str]]] = {
    RuleSection.PROJECT: ("项目特定规则", "*这些规则具有最高优先级，适用于当前项目*"),
    RuleSection.GLOBAL: ("全局通用规则", "*这些规则适用于所有项目，具有中等优先级*"),
    RuleSection.TEMPLATE: ("自定义模板规则", "*这些规则来自用户自定义模板*"),
}


def document_title(metadata: Metadata) -> str:
    return f"# {metadata.project_name} 项目规则集\n\n"


def metadata_block(metadata: Metadata, generated_at: datetime) -> str:
    return (
        "## 项目信息\n\n"
        f"- **项目名称**: {metadata.project_name}\n"
        f"- **技术栈**: {', '.join(metadata.tech_stacks)}\n"
        f"- **目标AI编辑器**: {', '.join(metadata.ai_editors)}\n"
        f"- **生成时间**: {generated_at.strftime(TIMESTAMP_FORMAT)}\n"
        f"- **版本**: {metadata.version}\n\n"
    )


def rule_block(rule: Rule) -> str:
    return (
        f"### {rule.title}\n\n"
        f"**类型**: {rule.type}  |  **优先级**: {rule.priority}  |  "
        f"**标签**: {', '.join(rule.tags)}\n\n"
        f"{rule.description}\n\n"
        f"**规则内容**:\n{rule.content}\n\n"
    )


def rule_sections(rule_set: RuleSet) -> str:
    """Render project, global and template rules; empty sections are omitted."""
    parts: list[str] = []
    for section, rules in rule_set.sections():
        if not rules:
            continue
        heading, caveat = SECTION_HEADINGS[section]
        parts.append(f"## {heading}\n\n{caveat}\n\n")
        parts.extend(rule_block(rule) for rule in rules if rule.enabled)
    return "".join(parts)


def usage_block(platform: str) -> str:
    return (
        "## 使用说明\n\n"
        "本规则集由 pf-ruler 工具自动生成，用于指导 AI 编辑器生成符合项目规范的代码。\n\n"
        "### 规则优先级\n\n"
        "1. **项目特定规则** - 最高优先级，覆盖其他规则\n"
        "2. **全局通用规则** - 中等优先级，适用于所有项目\n"
        "3. **自定义模板规则** - 可选，来自用户配置\n\n"
        "### 更新规则\n\n"
        "如需更新规则，请修改 `.ruler` 目录下的相应文件，"
        f"然后重新运行 `pf-ruler generate --platform={platform}` 命令。\n"
    )


def full_document(rule_set: RuleSet, platform: str, generated_at: datetime) -> str:
    return (
        document_title(rule_set.metadata)
        + metadata_block(rule_set.metadata, generated_at)
        + rule_sections(rule_set)
        + usage_block(platform)
    )
