"""Tests for create_vite_tailwind.steps module."""

from dataclasses import replace
from pathlib import Path

import pytest

from create_vite_tailwind.config import ScaffoldConfig
from create_vite_tailwind.exceptions import TemplateWriteError
from create_vite_tailwind.executor import CommandResult, FailureKind
from create_vite_tailwind.steps import PipelineResult, ScaffoldPipeline, ScaffoldStep, Stage, plan_steps

from tests.conftest import FakeRunner, FakeRunnerFactory

EXPECTED_COMMANDS = [
    ("npm", "create", "vite@latest", "MyApp", "--", "--template", "react-ts"),
    ("npm", "install"),
    ("npm", "install", "-D", "tailwindcss", "postcss", "autoprefixer"),
    ("npx", "tailwindcss", "init", "-p"),
    ("git", "init"),
    ("git", "add", "."),
    ("git", "commit", "-m", "First commit"),
]


def test_plan_steps_order(ts_config: ScaffoldConfig) -> None:
    steps = plan_steps(ts_config)

    assert [step.stage for step in steps] == [
        Stage.CREATE,
        Stage.INSTALL,
        Stage.STYLING_INSTALL,
        Stage.STYLING_INIT,
        Stage.TEMPLATES,
        Stage.VCS_INIT,
        Stage.VCS_STAGE,
        Stage.VCS_COMMIT,
    ]
    assert [step.invocation.command for step in steps if step.invocation] == EXPECTED_COMMANDS


def test_plan_steps_working_directories(ts_config: ScaffoldConfig) -> None:
    steps = [step for step in plan_steps(ts_config) if step.invocation]

    assert steps[0].invocation is not None
    assert steps[0].invocation.cwd == ts_config.root_dir
    for step in steps[1:]:
        assert step.invocation is not None
        assert step.invocation.cwd == ts_config.project_dir


def test_plan_steps_javascript_template(js_config: ScaffoldConfig) -> None:
    create = plan_steps(js_config)[0]
    assert create.invocation is not None
    assert create.invocation.command[-2:] == ("--template", "react")


def test_plan_steps_without_vcs(ts_config: ScaffoldConfig) -> None:
    steps = plan_steps(replace(ts_config, vcs_init=False))

    assert steps[-1].stage is Stage.TEMPLATES
    assert all(step.invocation is None or step.invocation.command[0] != "git" for step in steps)


def test_pipeline_result_exit_codes() -> None:
    assert PipelineResult().exit_code == 0
    failed = PipelineResult(failed_step=ScaffoldStep(Stage.TEMPLATES))
    assert failed.exit_code == 1


@pytest.mark.parametrize(("returncode", "expected"), [(3, 3), (-9, 137), (-2, 130), (None, 1)])
def test_pipeline_result_exit_code_for_failed_command(
    returncode: "int | None", expected: int, ts_config: ScaffoldConfig
) -> None:
    step = plan_steps(ts_config)[1]
    assert step.invocation is not None
    command_result = CommandResult(
        invocation=step.invocation,
        returncode=returncode,
        failure=FailureKind.SPAWN_ERROR if returncode is None else FailureKind.EXIT_STATUS,
    )

    result = PipelineResult(failed_step=step, command_result=command_result)

    assert result.exit_code == expected


@pytest.mark.anyio
async def test_pipeline_runs_every_step_once_in_order(ts_config: ScaffoldConfig, fake_runner: FakeRunner) -> None:
    writes: list[list[tuple[str, ...]]] = []

    async def writer(config: ScaffoldConfig) -> list[Path]:
        writes.append(list(fake_runner.commands))
        return [config.project_dir / "tailwind.config.js"]

    result = await ScaffoldPipeline(ts_config, fake_runner, writer).run()

    assert result.ok
    assert result.exit_code == 0
    assert fake_runner.commands == EXPECTED_COMMANDS
    assert result.completed == [step.stage for step in plan_steps(ts_config)]
    # templates are written after tailwind init and before git
    assert writes == [EXPECTED_COMMANDS[:4]]
    assert result.generated_files == [ts_config.project_dir / "tailwind.config.js"]


@pytest.mark.anyio
async def test_pipeline_stops_after_failed_install(
    ts_config: ScaffoldConfig, fake_runner_factory: FakeRunnerFactory
) -> None:
    runner = fake_runner_factory(fail_on=("npm", "install"), returncode=7)
    written: list[ScaffoldConfig] = []

    async def writer(config: ScaffoldConfig) -> list[Path]:
        written.append(config)
        return []

    result = await ScaffoldPipeline(ts_config, runner, writer).run()

    assert not result.ok
    assert result.completed == [Stage.CREATE]
    assert result.failed_step is not None
    assert result.failed_step.stage is Stage.INSTALL
    assert result.exit_code == 7
    assert runner.commands == EXPECTED_COMMANDS[:2]
    assert written == []


@pytest.mark.anyio
async def test_pipeline_stops_after_failed_git_init(
    ts_config: ScaffoldConfig, fake_runner_factory: FakeRunnerFactory
) -> None:
    runner = fake_runner_factory(fail_on=("git", "init"))

    async def writer(config: ScaffoldConfig) -> list[Path]:
        return []

    result = await ScaffoldPipeline(ts_config, runner, writer).run()

    assert result.failed_step is not None
    assert result.failed_step.stage is Stage.VCS_INIT
    assert runner.commands == EXPECTED_COMMANDS[:5]


@pytest.mark.anyio
async def test_pipeline_template_failure_skips_vcs(ts_config: ScaffoldConfig, fake_runner: FakeRunner) -> None:
    async def writer(config: ScaffoldConfig) -> list[Path]:
        raise TemplateWriteError("src/index.css", "Permission denied")

    result = await ScaffoldPipeline(ts_config, fake_runner, writer).run()

    assert not result.ok
    assert result.exit_code == 1
    assert isinstance(result.error, TemplateWriteError)
    assert result.failed_step is not None
    assert result.failed_step.stage is Stage.TEMPLATES
    assert fake_runner.commands == EXPECTED_COMMANDS[:4]
