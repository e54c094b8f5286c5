import sys
from pathlib import Path
from typing import Optional

import anyio
from click import command, option
from rich.markup import escape

from create_vite_tailwind.config import EXIT_CANCELLED, LoggingConfig, get_npm_path
from create_vite_tailwind.exceptions import ScaffoldCancelledError
from create_vite_tailwind.executor import CommandRunner
from create_vite_tailwind.guard import ensure_target_available
from create_vite_tailwind.prompts import collect_config
from create_vite_tailwind.reporter import print_intro, report_success
from create_vite_tailwind.steps import ScaffoldPipeline
from create_vite_tailwind.utils import configure_logging, console


def _build_logging_config(verbose: bool, quiet: bool) -> LoggingConfig:
    config = LoggingConfig()
    if verbose:
        config.level = "verbose"
    elif quiet:
        config.level = "quiet"
    return config


@command(
    name="create-vite-tailwind",
    help="Create a React project with Vite and Tailwind CSS.",
)
@option("--name", type=str, help="Project name. Prompted for when omitted.", default=None, required=False)
@option(
    "--typescript/--javascript",
    "typescript",
    help="Use the TypeScript or JavaScript React template. Prompted for when omitted.",
    default=None,
)
@option("--git/--no-git", "vcs_init", help="Initialize a git repository with a first commit.", default=True)
@option(
    "--minimal",
    help="Skip the tsconfig files and .gitignore and keep src/App.css.",
    type=bool,
    default=False,
    is_flag=True,
)
@option("--overwrite", type=bool, help="Remove an existing project directory without asking.", default=False, is_flag=True)
@option(
    "--no-prompt",
    help="Do not prompt and use all defaults for anything not given on the command line.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only show errors.", default=False, is_flag=True)
def create_vite_tailwind(
    name: "Optional[str]",
    typescript: "Optional[bool]",
    vcs_init: bool,
    minimal: bool,
    overwrite: bool,
    no_prompt: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Scaffold a new project."""
    logging_config = _build_logging_config(verbose, quiet)
    configure_logging(logging_config)
    print_intro()

    config = collect_config(
        name,
        typescript,
        vcs_init=vcs_init,
        rich_templates=not minimal,
        root_dir=Path.cwd(),
        no_prompt=no_prompt,
    )
    try:
        ensure_target_available(config, overwrite=overwrite, no_prompt=no_prompt)
    except ScaffoldCancelledError:
        console.print("[yellow]Operation cancelled.[/]")
        sys.exit(EXIT_CANCELLED)

    runner = CommandRunner(console, logging_config, npm_path=get_npm_path())
    pipeline = ScaffoldPipeline(config, runner)
    result = anyio.run(pipeline.run)

    if not result.ok:
        if result.command_result is not None:
            failed = result.command_result
            console.print(f"[bold red]Command failed: {escape(failed.invocation.display)}[/]")
            if failed.error:
                console.print(failed.error, markup=False, highlight=False)
        sys.exit(result.exit_code)

    report_success(config)
