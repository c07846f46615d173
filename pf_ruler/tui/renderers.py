from pathlib import Path

from rich.console import Console

from pf_ruler.output import WriteStatus
from pf_ruler.platforms.base import IPlatformAdapter
from pf_ruler.rules.models import RuleSet
from pf_ruler.scaffold import GitignoreStatus, ScaffoldResult
from pf_ruler.tui.enums import GITIGNORE_STATUS_STYLE, WRITE_STATUS_STYLE, UIStyle
from pf_ruler.tui.sections import UISection
from pf_ruler.tui.tables import PlatformTable, RuleSetTable


GITIGNORE_MESSAGES = {
    GitignoreStatus.ADDED: ".gitignore now ignores .ruler/",
    GitignoreStatus.PRESENT: ".gitignore already ignores .ruler/",
    GitignoreStatus.MISSING: "No .gitignore found, rule files may be committed.",
}


class RulerConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_rule_set(self, rule_set: RuleSet) -> None:
        self.console.print(
            UISection.wrap(
                "rule set",
                RuleSetTable.summary_block(rule_set),
                style=UIStyle.BLUE.value,
            )
        )
        self.console.print(
            UISection.wrap(
                "rules by section",
                RuleSetTable.sections_table(rule_set),
                style=UIStyle.CYAN.value,
            )
        )

    def render_written(self, platform: str, path: Path, status: WriteStatus) -> None:
        verb = "Overwrote" if status == WriteStatus.OVERWRITTEN else "Generated"
        self.console.print(
            UISection.note(
                platform,
                f"{verb} [bold]{path}[/bold]",
                style=WRITE_STATUS_STYLE[status],
            )
        )

    def render_scaffold(self, result: ScaffoldResult) -> None:
        written = "\n".join(f"- {path}" for path in result.written)
        self.console.print(
            UISection.wrap(
                "init",
                f"Rules root: [bold]{result.root}[/bold]\n{written}",
                style=UIStyle.GREEN.value,
            )
        )
        self.console.print(
            UISection.note(
                "gitignore",
                GITIGNORE_MESSAGES[result.gitignore],
                style=GITIGNORE_STATUS_STYLE[result.gitignore],
            )
        )
        self.console.print(
            UISection.note(
                "next",
                "Edit the files under .ruler, then run:\n- pf-ruler generate --platform <name>",
                style=UIStyle.DIM.value,
            )
        )

    def render_platforms(self, adapters: list[IPlatformAdapter], default: str) -> None:
        self.console.print(
            UISection.wrap(
                "platforms",
                PlatformTable.platforms_table(adapters, default),
                style=UIStyle.BLUE.value,
            )
        )
