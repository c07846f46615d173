"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterator

from pf_ruler.constants import RULESET_VERSION, UNKNOWN_PROJECT_NAME


MIN_PRIORITY = 1
MAX_PRIORITY = 5


class RuleType(str, Enum):
    CODE_STYLE = "code_style"
    SECURITY = "security"
    PERFORMANCE = "performance"
    TESTING = "testing"
    DEPLOYMENT = "deployment"
    DATABASE = "database"
    CACHE = "cache"
    API = "api"
    DOCUMENTATION = "documentation"
    GENERAL = "general"
    TECH_STACK = "tech_stack"
    NAMING = "naming"
    ERROR_HANDLING = "error_handling"
    FRAMEWORK = "framework"


class RuleSection(str, Enum):
    PROJECT = "project"
    GLOBAL = "global"
    TEMPLATE = "template"


@dataclass(frozen=True)
class Rule:
    title: str
    description: str
    type: str
    content: str
    priority: int = 4
    enabled: bool = True
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        clamped = min(MAX_PRIORITY, max(MIN_PRIORITY, int(self.priority)))
        object.__setattr__(self, "priority", clamped)
        if isinstance(self.type, RuleType):
            object.__setattr__(self, "type", self.type.value)


@dataclass(frozen=True)
class Metadata:
    project_name: str = UNKNOWN_PROJECT_NAME
    tech_stacks: list[str] = field(default_factory=list)
    ai_editors: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    last_updated_at: datetime = field(default_factory=datetime.now)
    version: str = RULESET_VERSION


@dataclass(frozen=True)
class RuleSet:
    project_rules: list[Rule] = field(default_factory=list)
    global_rules: list[Rule] = field(default_factory=list)
    template_rules: list[Rule] = field(default_factory=list)
    metadata: Metadata = field(default_factory=Metadata)

    def rules_for(self, section: RuleSection) -> list[Rule]:
        if section == RuleSection.PROJECT:
            return self.project_rules
        if section == RuleSection.GLOBAL:
            return self.global_rules
        return self.template_rules

    def sections(self) -> Iterator[tuple[RuleSection, list[Rule]]]:
        """Yield rule lists in render order: project, global, template."""
        for section in (RuleSection.PROJECT, RuleSection.GLOBAL, RuleSection.TEMPLATE):
            yield section, self.rules_for(section)

    def enabled(self, section: RuleSection) -> list[Rule]:
        return [rule for rule in self.rules_for(section) if rule.enabled]

    def total(self) -> int:
        return len(self.project_rules) + len(self.global_rules) + len(self.template_rules)


def sort_by_priority(rules: list[Rule]) -> list[Rule]:
    return sorted(rules, key=lambda rule: rule.priority, reverse=True)
