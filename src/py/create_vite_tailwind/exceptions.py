"""create-vite-tailwind exception classes."""

__all__ = [
    "CommandExecutionError",
    "ExecutableNotFoundError",
    "ScaffoldCancelledError",
    "ScaffoldError",
    "TemplateWriteError",
]


class ScaffoldError(Exception):
    """Base exception for scaffolding related errors."""


class ExecutableNotFoundError(ScaffoldError):
    """Raised when an external executable is not found on the PATH."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Executable {executable!r} not found.")


class CommandExecutionError(ScaffoldError):
    """Raised when an external command fails."""

    def __init__(self, command: "list[str]", return_code: "int | None", stderr: str) -> None:
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        super().__init__(f"Command {command!r} failed with return code {return_code}.\nStderr: {stderr}")


class TemplateWriteError(ScaffoldError):
    """Raised when a template file cannot be written into the project."""

    def __init__(self, target: str, message: str) -> None:
        self.target = target
        self.message = message
        super().__init__(f"Error creating {target}: {message}")


class ScaffoldCancelledError(ScaffoldError):
    """Raised when the user declines to replace an existing project directory."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Scaffolding of {target!r} was cancelled by the user.")
