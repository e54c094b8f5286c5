"""Existing project directory handling."""

import shutil
from typing import TYPE_CHECKING

from rich.markup import escape

from create_vite_tailwind.exceptions import ScaffoldCancelledError
from create_vite_tailwind.prompts import ExistingDirectoryAction, ask_existing_directory_action
from create_vite_tailwind.utils import console, logger

if TYPE_CHECKING:
    from create_vite_tailwind.config import ScaffoldConfig


def ensure_target_available(config: "ScaffoldConfig", *, overwrite: bool = False, no_prompt: bool = False) -> None:
    """Make sure the project directory can be created.

    Nothing happens when the target does not exist. Otherwise the user chooses
    between cancelling and removing the existing tree. ``overwrite`` removes it
    without asking and ``no_prompt`` alone cancels.

    Args:
        config: The scaffolding configuration.
        overwrite: Remove an existing target without prompting.
        no_prompt: Do not prompt; cancel unless ``overwrite`` is set.

    Raises:
        ScaffoldCancelledError: If the user chose to cancel.
    """
    target = config.project_dir
    if not target.exists():
        return

    if overwrite:
        action = ExistingDirectoryAction.REMOVE
    elif no_prompt:
        action = ExistingDirectoryAction.CANCEL
    else:
        action = ask_existing_directory_action(config.project_name)

    if action is ExistingDirectoryAction.CANCEL:
        raise ScaffoldCancelledError(str(target))

    logger.debug("Removing %s", target)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()
    console.print(f"[yellow]Removed existing {escape(config.project_name)}[/]")
