from typing import Optional

from rich.console import Console


class ConsoleUI:
    """
    Operator output on the terminal. Errors and warnings go to stderr so
    stdout carries only results.
    """

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

    def warn(self, message: str) -> None:
        self.err_console.print(message, style="yellow", markup=False)

    def error(self, message: str) -> None:
        self.err_console.print(message, style="red", markup=False)
