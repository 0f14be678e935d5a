from rich.panel import Panel
from rich.text import Text


class Panels:
    def __init__(self, config):
        self.config = config

    def render_info_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="center"), title=f"{title}", border_style="bright_black")

    def render_inventory_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="left"), title=f"{title}", border_style=self.config.inventory_panel_color)

    def render_round_header(self, round_number: int) -> Text:
        return Text(" " * 8 + f"--- ROUND {round_number} ---", style=self.config.round_header_color)

    def render_end_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="center"), title=f"{title}", border_style="red")

    @staticmethod
    def render_error_panel(title: str, message: str) -> Panel:
        return Panel(Text(message, justify="left"), title=f"{title}", border_style="bold red")
