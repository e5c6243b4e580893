"""
Console formatting for the resource-fetch command line.

Status output goes to stderr so stdout can carry the fetched bytes.
"""

from typing import Optional

from rich.console import Console

from ..exceptions import FetchError
from ..logging.filters import SensitiveDataFilter


class Formatter:
    """Rich-based status messages for CLI output."""

    def __init__(self, verbose: bool = False, console: Optional[Console] = None) -> None:
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self._masker = SensitiveDataFilter()

    def _print(self, message: str, style: str) -> None:
        # Messages carry URLs and bracketed text, never rich markup
        self.console.print(
            self._masker.mask(message), style=style, markup=False, highlight=False
        )

    def print_success(self, message: str) -> None:
        """Print a success message with green checkmark."""
        self._print(f"✓ {message}", "bold green")

    def print_error(self, message: str) -> None:
        """Print an error message with red X."""
        self._print(f"✗ {message}", "bold red")

    def print_info(self, message: str) -> None:
        """Print an info message, only in verbose mode."""
        if self.verbose:
            self._print(f"ℹ {message}", "bold blue")

    def print_fetch_error(self, error: FetchError) -> None:
        """Print a fetch failure with its kind."""
        self.print_error(f"{error.message} [{error.kind.value}]")


def create_formatter(verbose: bool = False) -> Formatter:
    """Create a formatter for CLI output."""
    return Formatter(verbose=verbose)
