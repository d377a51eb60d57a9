"""User-facing status output for CLI operations.

Design principles:
- Single line updates, no spam
- Everything goes to stderr so stdout stays clean for JSON output
- Graceful degradation in non-TTY (CI, pipes)

Usage::

    from typegraph.core.progress import status

    status("Extracting 12 exports...")
    status("Wrote graph.json", style="success")  # ✓ Wrote graph.json
    status("3 roots failed", style="error")  # ✗ 3 roots failed
"""

from __future__ import annotations

from rich.console import Console

# Console for output
_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a single status line with an optional style marker.

    Args:
        message: Text to print
        style: One of success, error, warning, info, none
        indent: Number of leading spaces
    """
    prefix = _STYLES.get(style, "")
    _console.print(f"{' ' * indent}{prefix}{message}", highlight=False)
