"""Parse markdown rule sources into Rule records."""

from __future__ import annotations

from datetime import datetime
from typing import Final

from pf_ruler.rules.classifier import (
    classify_global_title,
    classify_section,
    infer_global_tags,
)
from pf_ruler.rules.models import Rule

SECTION_PREFIX: Final[str] = "## "
BULLET_PREFIX: Final[str] = "- "

# Consumed by tech_stack.yaml instead of becoming generic rules.
SUPPRESSED_SECTIONS: Final[frozenset[str]] = frozenset(
    {"项目基本信息", "技术栈", "目标 AI 编辑器"}
)

HIGH_PRIORITY_KEYWORDS: Final[tuple[str, ...]] = ("安全", "性能")
SECTION_PRIORITY: Final[int] = 4
HIGH_SECTION_PRIORITY: Final[int] = 5
GLOBAL_FILE_PRIORITY: Final[int] = 4


def section_priority(title: str) -> int:
    lowered = title.lower()
    if any(keyword in lowered for keyword in HIGH_PRIORITY_KEYWORDS):
        return HIGH_SECTION_PRIORITY
    return SECTION_PRIORITY


def rule_from_section(title: str, lines: list[str]) -> Rule:
    rule_type, tags = classify_section(title)
    now = datetime.now()
    return Rule(
        title=title,
        description=f"项目 {title} 相关的要求和规范",
        type=rule_type,
        content="\n".join(lines),
        priority=section_priority(title),
        enabled=True,
        tags=tags,
        created_at=now,
        updated_at=now,
    )


def parse_requirements(text: str) -> list[Rule]:
    """Turn a requirements document into one rule per ``## `` section.

    Blank lines and lines starting with ``#`` are dropped from section
    bodies, sections without body lines are skipped, and the sections in
    ``SUPPRESSED_SECTIONS`` never produce a rule.
    """
    rules: list[Rule] = []
    title: str | None = None
    body: list[str] = []

    def flush() -> None:
        if title is not None and body:
            rules.append(rule_from_section(title, body))

    for raw in text.split("\n"):
        line = raw.strip()
        if line.startswith(SECTION_PREFIX):
            flush()
            name = line[len(SECTION_PREFIX) :]
            title = None if name in SUPPRESSED_SECTIONS else name
            body = []
        elif title is not None and line and not line.startswith("#"):
            body.append(line)

    flush()
    return rules


def parse_global_markdown(text: str, filename: str) -> list[Rule]:
    """Turn a global rule bundle into one rule per ``## `` section.

    Only ``- `` bullet lines count as section content; sections without
    any bullet are dropped.
    """
    rules: list[Rule] = []
    title: str | None = None
    bullets: list[str] = []

    def flush() -> None:
        if title is None or not bullets:
            return
        now = datetime.now()
        rules.append(
            Rule(
                title=title,
                description=f"来自 {filename} 的规则",
                type=classify_global_title(title),
                content="\n".join(bullets),
                priority=GLOBAL_FILE_PRIORITY,
                enabled=True,
                tags=infer_global_tags(title, filename),
                created_at=now,
                updated_at=now,
            )
        )

    for raw in text.split("\n"):
        line = raw.strip()
        if line.startswith(SECTION_PREFIX):
            flush()
            title = line[len(SECTION_PREFIX) :]
            bullets = []
        elif title is not None and line.startswith(BULLET_PREFIX):
            bullets.append(line)

    flush()
    return rules
