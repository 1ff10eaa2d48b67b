"""Version information for commitgate."""

import importlib.metadata
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

console = Console()


def get_current_version() -> str:
    """Get the current version of commitgate."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("commitgate")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def display_version_info() -> None:
    """Display version information."""
    current_version = get_current_version()
    installed_version = get_installed_version()

    version_text = Text()
    version_text.append("commitgate\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")
    version_text.append(f"Installation path: {Path(__file__).parent}\n", style="yellow")

    if current_version != installed_version:
        version_text.append("\n⚠️  Version mismatch detected!\n", style="red")
        version_text.append("Consider reinstalling: pip install -e .\n", style="yellow")

    console.print(Panel(version_text, title="Version Information", border_style="blue"))

