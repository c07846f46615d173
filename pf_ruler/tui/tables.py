from collections import Counter

from rich.table import Column, Table

from pf_ruler.platforms.base import IPlatformAdapter
from pf_ruler.rules.models import RuleSet
from pf_ruler.tui.enums import UIStyle
from pf_ruler.tui.sections import UISection


class RuleSetTable:
    @staticmethod
    def summary_block(rule_set: RuleSet):
        metadata = rule_set.metadata
        return UISection.key_values(
            [
                ("Project", metadata.project_name),
                ("Tech stacks", ", ".join(metadata.tech_stacks) or "none"),
                ("AI editors", ", ".join(metadata.ai_editors) or "none"),
                ("Version", metadata.version),
                ("Rules", str(rule_set.total())),
            ]
        )

    @staticmethod
    def sections_table(rule_set: RuleSet) -> Table:
        table = Table(
            Column("section", style="bold"),
            Column("rules", justify="right"),
            Column("enabled", justify="right"),
            Column("types"),
            expand=True,
        )
        for section, rules in rule_set.sections():
            counts = Counter(rule.type for rule in rules)
            chips = [f"{key}={value}" for key, value in sorted(counts.items())]
            table.add_row(
                section.value,
                str(len(rules)),
                str(len(rule_set.enabled(section))),
                "  ".join(chips) or "[dim]none[/dim]",
            )
        return table


class PlatformTable:
    @staticmethod
    def platforms_table(adapters: list[IPlatformAdapter], default: str) -> Table:
        table = Table(
            Column("platform", style="bold"),
            Column("output path"),
            Column("default", justify="center"),
            expand=True,
        )
        for adapter in adapters:
            marker = (
                f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
                if adapter.name == default
                else ""
            )
            table.add_row(adapter.name, adapter.default_output_path, marker)
        return table
