"""Scaffolding configuration.

The session answers are collected once into an immutable :class:`ScaffoldConfig`
which is handed to every later step. Defaults may be overridden through the
environment:

- ``CREATE_VITE_TAILWIND_DEFAULT_NAME``: default project name offered by the prompt
- ``CREATE_VITE_TAILWIND_LOG_LEVEL``: ``quiet``, ``normal`` or ``verbose``
- ``CREATE_VITE_TAILWIND_NPM``: explicit path to the ``npm`` executable
- ``CREATE_VITE_TAILWIND_SUPPRESS_NPM_OUTPUT``: do not echo npm output
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

__all__ = (
    "DEFAULT_PROJECT_NAME",
    "EXIT_CANCELLED",
    "TAILWIND_PACKAGES",
    "TRUE_VALUES",
    "Language",
    "LoggingConfig",
    "ScaffoldConfig",
    "get_default_log_level",
    "get_default_project_name",
    "get_npm_path",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
DEFAULT_PROJECT_NAME = "MyApp"
TAILWIND_PACKAGES = ("tailwindcss", "postcss", "autoprefixer")
EXIT_CANCELLED = 130
"""Exit status used when the user cancels at the existing directory prompt."""


class Language(str, Enum):
    """Source language of the generated React project."""

    TYPESCRIPT = "ts"
    JAVASCRIPT = "js"


def get_default_project_name() -> str:
    """Get the default project name.

    Returns:
        The value of ``CREATE_VITE_TAILWIND_DEFAULT_NAME`` or ``"MyApp"``.
    """
    return os.getenv("CREATE_VITE_TAILWIND_DEFAULT_NAME") or DEFAULT_PROJECT_NAME


def get_npm_path() -> "str | None":
    return os.getenv("CREATE_VITE_TAILWIND_NPM") or None


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks CREATE_VITE_TAILWIND_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_VITE_TAILWIND_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Logging configuration for console output.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Minimal output (errors only)
            - "normal": Standard operational messages (default)
            - "verbose": Detailed debugging information
            Can also be set via CREATE_VITE_TAILWIND_LOG_LEVEL environment variable.
        suppress_npm_output: Do not echo the captured stdout of external commands.
            Always the case in quiet mode. Can also be set via
            CREATE_VITE_TAILWIND_SUPPRESS_NPM_OUTPUT.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)
    suppress_npm_output: bool = field(
        default_factory=lambda: os.getenv("CREATE_VITE_TAILWIND_SUPPRESS_NPM_OUTPUT", "False") in TRUE_VALUES
    )

    @property
    def echo_command_output(self) -> bool:
        return not self.suppress_npm_output and self.level != "quiet"


@dataclass(frozen=True)
class ScaffoldConfig:
    """Answers that drive a single scaffolding run.

    Attributes:
        project_name: Name of the project directory to create.
        language: TypeScript or JavaScript flavour of the React template.
        vcs_init: Initialize a git repository with a first commit.
        rich_templates: Also write tsconfig files and ``.gitignore`` and remove
            the default ``src/App.css``.
        root_dir: Directory in which the project directory is created.
    """

    project_name: str = field(default_factory=get_default_project_name)
    language: Language = Language.TYPESCRIPT
    vcs_init: bool = True
    rich_templates: bool = True
    root_dir: Path = field(default_factory=Path.cwd)

    @property
    def project_dir(self) -> Path:
        return self.root_dir / self.project_name

    @property
    def use_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def vite_template(self) -> str:
        """Name of the ``create-vite`` template for the selected language."""
        return "react-ts" if self.use_typescript else "react"

    @property
    def component_extension(self) -> str:
        return "tsx" if self.use_typescript else "jsx"
