"""Tests for the platform adapters."""

from datetime import datetime

import yaml

from pf_ruler.platforms import CodexAdapter, CursorAdapter, TraeAdapter
from pf_ruler.rules.models import Metadata, Rule, RuleSet


FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5)


def _clock() -> datetime:
    return FIXED_NOW


def _rule(title: str, enabled: bool = True, priority: int = 4) -> Rule:
    return Rule(
        title=title,
        description=f"{title} 描述",
        type="security",
        content=f"- {title} 内容",
        priority=priority,
        enabled=enabled,
        tags=["security", "go"],
    )


def _rule_set() -> RuleSet:
    return RuleSet(
        project_rules=[_rule("项目规则A", priority=5), _rule("隐藏规则", enabled=False)],
        global_rules=[_rule("全局规则B")],
        template_rules=[_rule("模板规则C")],
        metadata=Metadata(
            project_name="demo",
            tech_stacks=["Go+Gin", "Redis"],
            ai_editors=["Trae", "Cursor"],
        ),
    )


def test_trae_identity() -> None:
    adapter = TraeAdapter()
    assert adapter.name == "trae"
    assert adapter.default_output_path == ".trae/rules/project_rules.md"


def test_trae_renders_metadata_block() -> None:
    text = TraeAdapter(clock=_clock).convert(_rule_set()).decode("utf-8")
    assert text.startswith("# demo 项目规则集\n\n## 项目信息\n\n")
    assert "- **技术栈**: Go+Gin, Redis\n" in text
    assert "- **目标AI编辑器**: Trae, Cursor\n" in text
    assert "- **生成时间**: 2025-01-02 03:04:05\n" in text
    assert "- **版本**: 1.0.0\n" in text


def test_trae_renders_sections_in_fixed_order() -> None:
    text = TraeAdapter(clock=_clock).convert(_rule_set()).decode("utf-8")
    project = text.index("## 项目特定规则")
    global_ = text.index("## 全局通用规则")
    template = text.index("## 自定义模板规则")
    usage = text.index("## 使用说明")
    assert project < global_ < template < usage
    assert text.index("### 项目规则A") < global_


def test_trae_rule_block() -> None:
    text = TraeAdapter(clock=_clock).convert(_rule_set()).decode("utf-8")
    assert (
        "### 项目规则A\n\n"
        "**类型**: security  |  **优先级**: 5  |  **标签**: security, go\n\n"
        "项目规则A 描述\n\n"
        "**规则内容**:\n- 项目规则A 内容\n\n"
    ) in text


def test_trae_skips_disabled_rules() -> None:
    rule_set = _rule_set()
    text = TraeAdapter(clock=_clock).convert(rule_set).decode("utf-8")
    assert "隐藏规则" not in text
    assert any(rule.title == "隐藏规则" for rule in rule_set.project_rules)


def test_trae_empty_rule_set_keeps_boilerplate() -> None:
    text = TraeAdapter(clock=_clock).convert(RuleSet()).decode("utf-8")
    assert text.startswith("# 未知项目 项目规则集")
    assert "## 项目信息" in text
    assert "## 使用说明" in text
    assert "pf-ruler generate --platform=trae" in text
    assert "## 项目特定规则" not in text


def test_cursor_frontmatter() -> None:
    adapter = CursorAdapter(clock=_clock)
    assert adapter.default_output_path == ".cursor/rules/project_rules.mdc"
    text = adapter.convert(_rule_set()).decode("utf-8")
    assert text.startswith("---\n")
    _, frontmatter, body = text.split("---\n", 2)
    assert yaml.safe_load(frontmatter) == {
        "description": "demo 项目规则集",
        "alwaysApply": True,
    }
    assert "### 全局规则B" in body
    assert "隐藏规则" not in body
    assert "--platform=cursor" in body


def test_codex_agents_document() -> None:
    adapter = CodexAdapter()
    assert adapter.default_output_path == "AGENTS.md"
    text = adapter.convert(_rule_set()).decode("utf-8")
    assert text.startswith("# demo\n")
    assert "### 项目规则A\n\n- 项目规则A 内容\n" in text
    assert "隐藏规则" not in text
    assert text.index("## 项目特定规则") < text.index("## 全局通用规则")


def test_codex_empty_rule_set() -> None:
    text = CodexAdapter().convert(RuleSet()).decode("utf-8")
    assert "## 使用说明" in text
    assert "###" not in text
