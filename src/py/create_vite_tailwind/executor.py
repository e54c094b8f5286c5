"""External command execution.

The runner turns a :class:`CommandInvocation` into a :class:`CommandResult`.
Failures are reported as data so the pipeline can stop and the CLI can decide
how to exit; :meth:`CommandResult.raise_for_status` is available for callers
that prefer exceptions.
"""

import platform
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import anyio

from create_vite_tailwind.config import LoggingConfig
from create_vite_tailwind.exceptions import CommandExecutionError, ExecutableNotFoundError
from create_vite_tailwind.utils import logger

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ("CommandInvocation", "CommandResult", "CommandRunner", "FailureKind")


class FailureKind(str, Enum):
    """Why a command did not succeed."""

    EXIT_STATUS = "exit-status"
    SPAWN_ERROR = "spawn-error"


@dataclass(frozen=True)
class CommandInvocation:
    """A single external command.

    Attributes:
        command: Program and arguments.
        message: Human readable status shown while the command runs.
        cwd: Working directory for the command.
    """

    command: "tuple[str, ...]"
    message: str
    cwd: Path = Path(".")

    @property
    def display(self) -> str:
        return shlex.join(self.command)


@dataclass
class CommandResult:
    """Outcome of running a :class:`CommandInvocation`."""

    invocation: CommandInvocation
    returncode: "int | None" = None
    stdout: str = ""
    stderr: str = ""
    failure: "FailureKind | None" = None
    error: "str | None" = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_status(self) -> None:
        """Raise if the command did not succeed.

        Raises:
            CommandExecutionError: If the command failed to spawn or exited non-zero.
        """
        if self.ok:
            return
        raise CommandExecutionError(list(self.invocation.command), self.returncode, self.error or self.stderr)


class CommandRunner:
    """Run external commands one at a time with a status line."""

    def __init__(
        self,
        console: "Console",
        logging_config: "LoggingConfig | None" = None,
        npm_path: "Path | str | None" = None,
    ) -> None:
        self.console = console
        self.logging_config = logging_config or LoggingConfig()
        self.npm_path = npm_path

    def _resolve_executable(self, name: str) -> str:
        if name == "npm" and self.npm_path:
            return str(self.npm_path)
        path = shutil.which(name)
        if path is None:
            raise ExecutableNotFoundError(name)
        return path

    async def execute(self, invocation: CommandInvocation) -> CommandResult:
        """Run a command and wait for it to finish.

        Args:
            invocation: The command to run.

        Returns:
            The result; ``failure`` is set when the command could not be spawned
            or exited with a non-zero status.
        """
        logger.debug("Running %s in %s", invocation.display, invocation.cwd)
        try:
            executable = self._resolve_executable(invocation.command[0])
        except ExecutableNotFoundError as e:
            self.console.print(f"[red]✗ {invocation.message}[/]")
            return CommandResult(invocation=invocation, failure=FailureKind.SPAWN_ERROR, error=str(e))

        argv = [executable, *invocation.command[1:]]
        # npm and npx are batch files on Windows and need the shell
        command: "str | list[str]" = subprocess.list2cmdline(argv) if platform.system() == "Windows" else argv
        try:
            with self.console.status(invocation.message):
                process = await anyio.run_process(command, cwd=invocation.cwd, check=False)
        except OSError as e:
            self.console.print(f"[red]✗ {invocation.message}[/]")
            return CommandResult(invocation=invocation, failure=FailureKind.SPAWN_ERROR, error=str(e))

        stdout = process.stdout.decode(errors="replace") if process.stdout else ""
        stderr = process.stderr.decode(errors="replace") if process.stderr else ""
        if process.returncode != 0:
            logger.debug("%s exited with %s", invocation.display, process.returncode)
            self.console.print(f"[red]✗ {invocation.message}[/]")
            return CommandResult(
                invocation=invocation,
                returncode=process.returncode,
                stdout=stdout,
                stderr=stderr,
                failure=FailureKind.EXIT_STATUS,
                error=stderr.strip() or None,
            )

        if self.logging_config.echo_command_output:
            for line in stdout.split("\n"):
                self.console.print(line, markup=False, highlight=False)
        self.console.print(f"[green]✓ {invocation.message}[/]")
        return CommandResult(invocation=invocation, returncode=0, stdout=stdout, stderr=stderr)
