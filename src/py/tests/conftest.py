from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from create_vite_tailwind.config import Language, ScaffoldConfig
from create_vite_tailwind.executor import CommandInvocation, CommandResult, FailureKind

# Environment variables that may affect test behavior - clear before each test
_ENV_VARS = [
    "CREATE_VITE_TAILWIND_DEFAULT_NAME",
    "CREATE_VITE_TAILWIND_LOG_LEVEL",
    "CREATE_VITE_TAILWIND_NPM",
    "CREATE_VITE_TAILWIND_SUPPRESS_NPM_OUTPUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear create-vite-tailwind environment variables before each test for isolation."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeRunner:
    """Records invocations and fails on a chosen command."""

    def __init__(self, fail_on: "tuple[str, ...] | None" = None, returncode: int = 1) -> None:
        self.invocations: list[CommandInvocation] = []
        self.fail_on = fail_on
        self.returncode = returncode

    @property
    def commands(self) -> list["tuple[str, ...]"]:
        return [invocation.command for invocation in self.invocations]

    async def execute(self, invocation: CommandInvocation) -> CommandResult:
        self.invocations.append(invocation)
        if self.fail_on is not None and invocation.command == self.fail_on:
            return CommandResult(
                invocation=invocation,
                returncode=self.returncode,
                stderr="boom",
                failure=FailureKind.EXIT_STATUS,
                error="boom",
            )
        return CommandResult(invocation=invocation, returncode=0)


FakeRunnerFactory = Callable[..., FakeRunner]


@pytest.fixture
def fake_runner_factory() -> FakeRunnerFactory:
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def ts_config(tmp_path: Path) -> ScaffoldConfig:
    return ScaffoldConfig(project_name="MyApp", language=Language.TYPESCRIPT, root_dir=tmp_path)


@pytest.fixture
def js_config(tmp_path: Path) -> ScaffoldConfig:
    return ScaffoldConfig(project_name="MyApp", language=Language.JAVASCRIPT, root_dir=tmp_path)
