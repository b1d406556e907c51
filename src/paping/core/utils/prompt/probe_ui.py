"""Probe session output.

Renders the session header, one line per probe and the closing statistics
in the classic paping layout, colored with rich markup.
"""

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from paping.core.lib.probe_engine import Connected, ProbeOutcome
from paping.core.lib.probe_stats import ProbeSummary
from paping.core.network import IPAddress
from paping.core.socks5 import ProxyConfig
from paping.core.utils.utils import format_latency, format_percent

from .prompt import PromptHandler


class ProbeUI(PromptHandler):
    """UI handler for a probe session."""

    def __init__(self, host: str, port: int, proxy: ProxyConfig | None = None, output=None) -> None:
        super().__init__(output)
        self.host = host
        self.port = port
        self.proxy = proxy

    def print_header(self, bind_address: IPAddress | None = None) -> None:
        line = Text("Connecting to  ")
        line.append(self.host, style="green")
        line.append("  on TCP  ")
        line.append(str(self.port), style="green")
        if bind_address is not None:
            line.append(" from  ")
            line.append(str(bind_address), style="yellow")
        if self.proxy is not None:
            line.append("  via proxy  ")
            line.append(self.proxy.address, style="cyan")
        line.append(":")

        self.console.print()
        self.console.print(line)
        self.console.print()

    def print_outcome(self, outcome: ProbeOutcome) -> None:
        if isinstance(outcome, Connected):
            via = "  proxy=[cyan]SOCKS5[/cyan]" if self.proxy is not None else ""
            self.console.print(
                f"Connected to [green]{escape(self.host)}[/green]: "
                f"time=[green]{format_latency(outcome.latency_ms)}[/green]  "
                f"protocol=[green]TCP[/green]  port=[green]{self.port}[/green]{via}"
            )
        else:
            self.console.print(
                f"Connection to [green]{escape(self.host)}[/green] [red]failed[/red]: ",
                Text(outcome.reason),
                sep="",
            )

    def print_statistics(self, summary: ProbeSummary) -> None:
        """Print the closing statistics panel."""
        table = self.create_table()
        table.add_row("Attempted", str(summary.attempted))
        table.add_row("Connected", str(summary.connected))
        table.add_row(
            "Failed", f"{summary.failed} ({format_percent(summary.failed_percent)})"
        )
        if summary.average is not None:
            table.add_row("Minimum", format_latency(summary.minimum))
            table.add_row("Maximum", format_latency(summary.maximum))
            table.add_row("Average", format_latency(summary.average))

        self.console.print()
        self.console.print(
            Panel(
                table,
                title=Text("Connection statistics", style="bold cyan"),
                border_style="blue",
                expand=False,
                padding=(0, 2),
            )
        )
