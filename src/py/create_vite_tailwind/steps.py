"""Scaffolding pipeline.

The plan is fixed: create the Vite project, install dependencies, install and
initialize Tailwind, write the templates and optionally commit everything to a
fresh git repository. Steps run strictly one after the other and the first
failure stops the run.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from create_vite_tailwind.config import TAILWIND_PACKAGES, ScaffoldConfig
from create_vite_tailwind.exceptions import TemplateWriteError
from create_vite_tailwind.executor import CommandInvocation, CommandResult
from create_vite_tailwind.scaffolding import write_templates
from create_vite_tailwind.utils import console, logger

if TYPE_CHECKING:
    from create_vite_tailwind.executor import CommandRunner

__all__ = ("PipelineResult", "ScaffoldPipeline", "ScaffoldStep", "Stage", "plan_steps")

TemplateWriter = Callable[[ScaffoldConfig], Awaitable[list[Path]]]


class Stage(str, Enum):
    """Pipeline stages in execution order."""

    CREATE = "create"
    INSTALL = "install"
    STYLING_INSTALL = "styling-install"
    STYLING_INIT = "styling-init"
    TEMPLATES = "templates"
    VCS_INIT = "vcs-init"
    VCS_STAGE = "vcs-stage"
    VCS_COMMIT = "vcs-commit"


@dataclass(frozen=True)
class ScaffoldStep:
    """One pipeline stage; ``invocation`` is ``None`` for the template stage."""

    stage: Stage
    invocation: "CommandInvocation | None" = None


@dataclass
class PipelineResult:
    """Outcome of a pipeline run."""

    completed: list[Stage] = field(default_factory=list)
    failed_step: "ScaffoldStep | None" = None
    command_result: "CommandResult | None" = None
    error: "TemplateWriteError | None" = None
    generated_files: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def exit_code(self) -> int:
        """Process exit status for this result.

        Returns:
            0 on success, the failing command's return code when it has one
            (``128 + n`` for a command killed by signal ``n``), otherwise 1.
        """
        if self.ok:
            return 0
        returncode = self.command_result.returncode if self.command_result is not None else None
        if not returncode:
            return 1
        if returncode < 0:
            return 128 - returncode
        return returncode


def plan_steps(config: "ScaffoldConfig") -> list[ScaffoldStep]:
    """Build the ordered list of steps for a configuration.

    Args:
        config: The scaffolding configuration.

    Returns:
        The steps in the order they must run.
    """
    project_dir = config.project_dir
    steps = [
        ScaffoldStep(
            Stage.CREATE,
            CommandInvocation(
                command=(
                    "npm",
                    "create",
                    "vite@latest",
                    config.project_name,
                    "--",
                    "--template",
                    config.vite_template,
                ),
                message="Creating project",
                cwd=config.root_dir,
            ),
        ),
        ScaffoldStep(
            Stage.INSTALL,
            CommandInvocation(command=("npm", "install"), message="Installing dependencies", cwd=project_dir),
        ),
        ScaffoldStep(
            Stage.STYLING_INSTALL,
            CommandInvocation(
                command=("npm", "install", "-D", *TAILWIND_PACKAGES),
                message="Installing Tailwind",
                cwd=project_dir,
            ),
        ),
        ScaffoldStep(
            Stage.STYLING_INIT,
            CommandInvocation(
                command=("npx", "tailwindcss", "init", "-p"),
                message="Initializing Tailwind",
                cwd=project_dir,
            ),
        ),
        ScaffoldStep(Stage.TEMPLATES),
    ]
    if config.vcs_init:
        steps.extend(
            [
                ScaffoldStep(
                    Stage.VCS_INIT,
                    CommandInvocation(command=("git", "init"), message="Initializing Git Repo", cwd=project_dir),
                ),
                ScaffoldStep(
                    Stage.VCS_STAGE,
                    CommandInvocation(command=("git", "add", "."), message="Staging files", cwd=project_dir),
                ),
                ScaffoldStep(
                    Stage.VCS_COMMIT,
                    CommandInvocation(
                        command=("git", "commit", "-m", "First commit"),
                        message="Creating first commit",
                        cwd=project_dir,
                    ),
                ),
            ]
        )
    return steps


class ScaffoldPipeline:
    """Run the scaffolding steps for one configuration."""

    def __init__(
        self,
        config: "ScaffoldConfig",
        runner: "CommandRunner",
        writer: "TemplateWriter | None" = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.writer = writer or write_templates

    async def run(self) -> PipelineResult:
        """Execute every step in order, stopping at the first failure.

        Returns:
            The pipeline result.
        """
        result = PipelineResult()
        for step in plan_steps(self.config):
            logger.debug("Starting stage %s", step.stage.value)
            if step.invocation is None:
                try:
                    result.generated_files = await self.writer(self.config)
                except TemplateWriteError as e:
                    console.print(f"[red]{escape(str(e))}[/]")
                    result.failed_step = step
                    result.error = e
                    return result
            else:
                command_result = await self.runner.execute(step.invocation)
                if not command_result.ok:
                    logger.error("%s failed: %s", step.invocation.display, command_result.error or "no output")
                    result.failed_step = step
                    result.command_result = command_result
                    return result
            result.completed.append(step.stage)
        return result
