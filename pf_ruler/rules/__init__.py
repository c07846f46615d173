from pf_ruler.rules.loader import RuleLoader
from pf_ruler.rules.models import (
    Metadata,
    Rule,
    RuleSection,
    RuleSet,
    RuleType,
    sort_by_priority,
)
from pf_ruler.rules.parser import parse_global_markdown, parse_requirements

__all__ = [
    "Metadata",
    "Rule",
    "RuleLoader",
    "RuleSection",
    "RuleSet",
    "RuleType",
    "parse_global_markdown",
    "parse_requirements",
    "sort_by_priority",
]
