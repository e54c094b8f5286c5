"""Terminal output for the start and end of a run."""

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from create_vite_tailwind.utils import console

if TYPE_CHECKING:
    from create_vite_tailwind.config import ScaffoldConfig


def print_intro() -> None:
    console.print("[cyan]Create React App with Vite and Tailwind[/]")
    console.print("[bold white on blue]INFO:[/] This tool uses the Vite, npm, Tailwind and git cli tools")


def report_success(config: "ScaffoldConfig") -> None:
    """Print the success banner and next steps.

    Args:
        config: The scaffolding configuration.
    """
    console.print(Panel(f"[bold green]{escape(config.project_name)} created[/]", expand=False))
    console.print("[bold white on blue]INFO:[/] To run use:")
    console.print(f"\n  cd {config.project_name}\n\n  npm run dev\n", markup=False, highlight=False)
