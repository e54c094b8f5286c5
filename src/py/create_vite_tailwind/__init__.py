"""create-vite-tailwind: scaffold a React project with Vite and Tailwind CSS.

Basic usage from Python:
    import anyio

    from create_vite_tailwind import CommandRunner, ScaffoldConfig, ScaffoldPipeline
    from create_vite_tailwind.utils import console

    config = ScaffoldConfig(project_name="my-app")
    result = anyio.run(ScaffoldPipeline(config, CommandRunner(console)).run)
"""

from create_vite_tailwind.__metadata__ import __version__
from create_vite_tailwind.config import Language, LoggingConfig, ScaffoldConfig
from create_vite_tailwind.executor import CommandInvocation, CommandResult, CommandRunner
from create_vite_tailwind.steps import PipelineResult, ScaffoldPipeline, Stage, plan_steps

__all__ = (
    "CommandInvocation",
    "CommandResult",
    "CommandRunner",
    "Language",
    "LoggingConfig",
    "PipelineResult",
    "ScaffoldConfig",
    "ScaffoldPipeline",
    "Stage",
    "__version__",
    "plan_steps",
)
