"""Base prompt handling and UI components."""

from rich.console import Console
from rich.table import Table

console = Console(highlight=False)


class PromptHandler:
    """Base class for terminal output."""

    def __init__(self, output: Console | None = None) -> None:
        """Initialize the handler.

        Args:
            output: Console to print to (default: the shared console)
        """
        self.console = output or console

    @staticmethod
    def create_table() -> Table:
        """Create a borderless two-column property table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green", no_wrap=True)
        return table
