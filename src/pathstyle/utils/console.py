"""Console output for the pathstyle command line.

Results are printed verbatim: paths are full of backslashes and brackets
that Rich would otherwise read as markup, and they are never wrapped.
"""

from typing import List, Tuple

from rich.table import Table
from rich.text import Text

from .console_base import ConsoleBase, ThemeColors, THEMES


class ConsoleManager(ConsoleBase):
    """Console with result and table helpers on top of ConsoleBase."""

    def print_result(self, value: str):
        """Print a single operation result on one line."""
        if self.use_rich:
            self.console.print(Text(value, style="path"), soft_wrap=True)
        else:
            print(value, file=self.file)

    def print_table(self, title: str, rows: List[Tuple[str, str]]):
        """
        Print label/value rows.

        Args:
            title: Table title (Rich output only), shown without markup
            rows: (label, value) pairs, printed in order
        """
        if self.use_rich:
            table = Table(title=Text(title, style="header"), show_header=False)
            table.add_column("operation", style="accent")
            table.add_column("result", style="path")
            for label, value in rows:
                table.add_row(Text(label), Text(value))
            self.console.print(table)
        else:
            width = max((len(label) for label, _ in rows), default=0)
            for label, value in rows:
                print(f"{label.ljust(width)}  {value}", file=self.file)


__all__ = ["ConsoleManager", "ThemeColors", "THEMES"]
