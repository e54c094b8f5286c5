"""Project template generator.

This module renders the packaged templates and writes them into the project
created by Vite.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import anyio
from jinja2 import Environment, FileSystemLoader

from create_vite_tailwind.exceptions import TemplateWriteError
from create_vite_tailwind.scaffolding.templates import get_removed_files, get_template_files
from create_vite_tailwind.utils import console, get_package_path, logger

if TYPE_CHECKING:
    from create_vite_tailwind.config import ScaffoldConfig


@dataclass
class TemplateContext:
    """Context variables for template rendering.

    Attributes:
        project_name: Name of the project
        use_typescript: Whether to use TypeScript
    """

    project_name: str
    use_typescript: bool = True

    @classmethod
    def from_config(cls, config: "ScaffoldConfig") -> "TemplateContext":
        return cls(project_name=config.project_name, use_typescript=config.use_typescript)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "project_name": self.project_name,
            "use_typescript": self.use_typescript,
        }


def get_template_dir() -> Path:
    """Get the directory containing the packaged templates.

    Returns:
        Path to the templates directory.
    """
    return get_package_path("templates")


def render_template(template_name: str, context: dict[str, Any]) -> str:
    """Render a packaged Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is code
    and configuration files, not HTML.

    Args:
        template_name: Template path relative to the templates directory.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    env = Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )
    template = env.get_template(template_name)
    return template.render(**context)


async def write_templates(config: "ScaffoldConfig") -> list[Path]:
    """Write the configured templates into the project directory.

    Each file is fully written before the next one starts, and all of them
    before this coroutine returns.

    Args:
        config: The scaffolding configuration.

    Raises:
        TemplateWriteError: If a file cannot be written or removed.

    Returns:
        List of generated file paths.
    """
    context = TemplateContext.from_config(config).to_dict()
    generated_files: list[Path] = []

    for template_file in get_template_files(config):
        output_path = anyio.Path(config.project_dir / template_file.target)
        content = render_template(template_file.template, context)
        try:
            await output_path.parent.mkdir(parents=True, exist_ok=True)
            await output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise TemplateWriteError(template_file.target, e.strerror or str(e)) from e
        logger.debug("Wrote %s", output_path)
        console.print(f"[green]Created {template_file.target}[/]")
        generated_files.append(Path(output_path))

    for removed in get_removed_files(config):
        try:
            await anyio.Path(config.project_dir / removed).unlink(missing_ok=True)
        except OSError as e:
            raise TemplateWriteError(removed, e.strerror or str(e)) from e
        logger.debug("Removed %s", removed)

    return generated_files
