from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from pf_ruler.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str = UIStyle.DIM.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1), expand=False)

    @staticmethod
    def key_values(rows: list[tuple[str, str]]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        for key, value in rows:
            table.add_row(key, value)
        return table
