"""Keyword tables that map section titles and filenames to rule types and tags.

Each table is an ordered tuple; the first entry whose keywords match wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from pf_ruler.rules.models import RuleType


@dataclass(frozen=True)
class Category:
    keywords: tuple[str, ...]
    value: str
    tags: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def first_match(table: tuple[Category, ...], text: str) -> Category | None:
    for category in table:
        if category.matches(text):
            return category
    return None


SECTION_CATEGORIES: tuple[Category, ...] = (
    Category(("代码规范", "编码规范"), RuleType.CODE_STYLE.value, ("code", "style", "naming")),
    Category(("安全约束", "安全规范"), RuleType.SECURITY.value, ("security", "encryption")),
    Category(("性能", "优化"), RuleType.PERFORMANCE.value, ("performance", "optimization")),
    Category(("测试", "单元测试"), RuleType.TESTING.value, ("testing", "unit_test")),
    Category(("部署", "运维"), RuleType.DEPLOYMENT.value, ("deployment", "devops")),
    Category(("数据库", "存储"), RuleType.DATABASE.value, ("database", "storage")),
    Category(("缓存", "redis"), RuleType.CACHE.value, ("cache", "redis")),
    Category(("接口", "api"), RuleType.API.value, ("api", "interface")),
    Category(("文档", "注释"), RuleType.DOCUMENTATION.value, ("documentation", "comments")),
)
GENERAL_SECTION = Category((), RuleType.GENERAL.value, ("general", "requirements"))

GLOBAL_TITLE_TYPES: tuple[Category, ...] = (
    Category(("安全",), RuleType.SECURITY.value),
    Category(("性能",), RuleType.PERFORMANCE.value),
    Category(("代码",), RuleType.CODE_STYLE.value),
    Category(("测试",), RuleType.TESTING.value),
    Category(("部署",), RuleType.DEPLOYMENT.value),
    Category(("数据库",), RuleType.DATABASE.value),
    Category(("缓存",), RuleType.CACHE.value),
)

# Substring match on the lowercased filename; "go" also hits names like "mongo".
FILENAME_TECH_TAGS: tuple[Category, ...] = (
    Category(("php",), "php"),
    Category(("go",), "go"),
    Category(("java",), "java"),
    Category(("python",), "python"),
    Category(("nodejs",), "nodejs"),
    Category(("frontend",), "frontend"),
    Category(("database",), "database"),
    Category(("cache",), "cache"),
    Category(("devops",), "devops"),
)

GLOBAL_TITLE_TAGS: tuple[Category, ...] = (
    Category(("安全",), "security"),
    Category(("性能",), "performance"),
    Category(("代码",), "code_style"),
    Category(("测试",), "testing"),
)


def classify_section(title: str) -> tuple[str, list[str]]:
    """Return ``(rule_type, tags)`` for a requirements document section.

    The lowercased title is always appended as the last tag.
    """
    lowered = title.lower()
    category = first_match(SECTION_CATEGORIES, lowered) or GENERAL_SECTION
    return category.value, [*category.tags, lowered]


def classify_global_title(title: str) -> str:
    category = first_match(GLOBAL_TITLE_TYPES, title.lower())
    return category.value if category else RuleType.GENERAL.value


def infer_global_tags(title: str, filename: str) -> list[str]:
    tags: list[str] = []
    tech = first_match(FILENAME_TECH_TAGS, filename.lower())
    if tech is not None:
        tags.append(tech.value)
    kind = first_match(GLOBAL_TITLE_TAGS, title.lower())
    if kind is not None:
        tags.append(kind.value)
    return tags
