"""Interactive prompts."""

from enum import Enum
from pathlib import Path

from rich.prompt import Prompt

from create_vite_tailwind.config import Language, ScaffoldConfig, get_default_project_name
from create_vite_tailwind.utils import console

__all__ = (
    "ExistingDirectoryAction",
    "ask_existing_directory_action",
    "ask_project_name",
    "ask_use_typescript",
    "collect_config",
)


class ExistingDirectoryAction(str, Enum):
    """Choices offered when the target directory already exists."""

    CANCEL = "cancel"
    REMOVE = "remove"


def ask_project_name(default: "str | None" = None) -> str:
    """Ask for the project name. Any answer is accepted as-is."""
    return Prompt.ask("Project name", default=default or get_default_project_name(), console=console)


def ask_use_typescript(default: bool = True) -> bool:
    answer = Prompt.ask("Use Typescript?", choices=["y", "n"], default="y" if default else "n", console=console)
    return answer == "y"


def ask_existing_directory_action(project_name: str) -> ExistingDirectoryAction:
    """Ask what to do with an existing project directory.

    Args:
        project_name: Name of the directory that already exists.

    Returns:
        The selected action, ``cancel`` by default.
    """
    answer = Prompt.ask(
        f'Target directory "{project_name}" is not empty. Please choose how to proceed',
        choices=[action.value for action in ExistingDirectoryAction],
        default=ExistingDirectoryAction.CANCEL.value,
        console=console,
    )
    return ExistingDirectoryAction(answer)


def collect_config(
    name: "str | None" = None,
    typescript: "bool | None" = None,
    *,
    vcs_init: bool = True,
    rich_templates: bool = True,
    root_dir: "Path | None" = None,
    no_prompt: bool = False,
) -> ScaffoldConfig:
    """Build the session configuration, prompting for anything not supplied.

    The project name is always asked before the language.

    Args:
        name: Project name given on the command line.
        typescript: Language preference given on the command line.
        vcs_init: Initialize a git repository.
        rich_templates: Write the richer template set.
        root_dir: Directory to create the project in. Defaults to the current directory.
        no_prompt: Use defaults instead of prompting.

    Returns:
        The finalized configuration.
    """
    if name is None:
        name = get_default_project_name() if no_prompt else ask_project_name()
    if typescript is None:
        typescript = True if no_prompt else ask_use_typescript()
    return ScaffoldConfig(
        project_name=name,
        language=Language.TYPESCRIPT if typescript else Language.JAVASCRIPT,
        vcs_init=vcs_init,
        rich_templates=rich_templates,
        root_dir=root_dir or Path.cwd(),
    )
