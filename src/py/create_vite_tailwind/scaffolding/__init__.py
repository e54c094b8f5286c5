"""Project template module for create-vite-tailwind.

Writes the Tailwind configuration, the global stylesheet and a sample React
component into a project generated by ``npm create vite``. The richer variant
also writes TypeScript configs and a ``.gitignore`` and removes ``src/App.css``.
"""

from create_vite_tailwind.scaffolding.generator import TemplateContext, render_template, write_templates
from create_vite_tailwind.scaffolding.templates import TemplateFile, get_removed_files, get_template_files

__all__ = [
    "TemplateContext",
    "TemplateFile",
    "get_removed_files",
    "get_template_files",
    "render_template",
    "write_templates",
]
