"""Template file definitions for scaffolding.

This module defines which packaged templates are written into the generated
project and which generated files are removed afterwards.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_vite_tailwind.config import ScaffoldConfig


@dataclass(frozen=True)
class TemplateFile:
    """A packaged template and where it lands in the project.

    Attributes:
        template: Template path relative to the package ``templates`` directory.
        target: Output path relative to the project directory.
    """

    template: str
    target: str


TAILWIND_CONFIG = TemplateFile(template="tailwind.config.js.j2", target="tailwind.config.js")
GLOBAL_STYLESHEET = TemplateFile(template="src/index.css.j2", target="src/index.css")
TSCONFIG = TemplateFile(template="tsconfig.json.j2", target="tsconfig.json")
TSCONFIG_NODE = TemplateFile(template="tsconfig.node.json.j2", target="tsconfig.node.json")
GITIGNORE = TemplateFile(template="gitignore.j2", target=".gitignore")

REMOVED_FILES: "tuple[str, ...]" = ("src/App.css",)


def get_component_template(config: "ScaffoldConfig") -> TemplateFile:
    """Get the root application component for the selected language.

    Args:
        config: The scaffolding configuration.

    Returns:
        ``src/App.tsx`` for TypeScript projects, ``src/App.jsx`` otherwise.
    """
    return TemplateFile(template="src/App.j2", target=f"src/App.{config.component_extension}")


def get_template_files(config: "ScaffoldConfig") -> list[TemplateFile]:
    """Get the templates to write, in write order.

    Args:
        config: The scaffolding configuration.

    Returns:
        The template files for the configured variant.
    """
    files = [TAILWIND_CONFIG, GLOBAL_STYLESHEET, get_component_template(config)]
    if config.rich_templates:
        files.extend([TSCONFIG, TSCONFIG_NODE, GITIGNORE])
    return files


def get_removed_files(config: "ScaffoldConfig") -> "tuple[str, ...]":
    """Get the generated files deleted after the templates are written."""
    return REMOVED_FILES if config.rich_templates else ()
