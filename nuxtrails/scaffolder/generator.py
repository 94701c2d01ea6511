"""Shared machinery for the per-model resource generators.

Every stage of the ``generate model`` cascade maps a fixed set of templates to
output paths derived from the ``ModelSpec``, renders them into a
``GeneratedFileSet`` and flushes that set under the project root.  Existing
files are always overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nuxtrails.config import Config
from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.fileset import GeneratedFileSet
from nuxtrails.scaffolder.templates import TemplateRenderer
from nuxtrails.utils import display_path, print_success


class ResourceGenerator:
    """Base class for one cascade stage.

    Subclasses set ``_TEMPLATES`` (template name -> output path relative to
    :meth:`output_dir`; ``{slug}`` and ``{class_name}`` are substituted) and
    ``label`` (used in the progress message).
    """

    _TEMPLATES: dict[str, str] = {}
    label: str = "Files"

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def output_dir(self, spec: ModelSpec) -> Path:
        """Directory the ``_TEMPLATES`` output paths are relative to."""
        return self.config.project_root

    def context(self, spec: ModelSpec) -> dict[str, Any]:
        return {"model": spec}

    def build(self, spec: ModelSpec) -> GeneratedFileSet:
        """Render every template for *spec* without touching the disk."""
        root = self.config.project_root
        base = self.output_dir(spec)
        ctx = self.context(spec)
        file_set = GeneratedFileSet(root=root)
        for template_name, pattern in self._TEMPLATES.items():
            output = base / pattern.format(slug=spec.table_slug, class_name=spec.class_name)
            file_set.add(display_path(output, root), self.renderer.render(template_name, ctx))
        return file_set

    async def generate(self, spec: ModelSpec) -> GeneratedFileSet:
        """Render and write the files for *spec*.

        Returns:
            The flushed file set, which can later be rolled back.
        """
        file_set = self.build(spec)
        await self.write(spec, file_set)
        return file_set

    async def write(self, spec: ModelSpec, file_set: GeneratedFileSet) -> None:
        """Flush *file_set*; if that fails or is interrupted, undo the partial write."""
        try:
            await file_set.flush()
        except BaseException:
            await file_set.rollback()
            raise
        print_success(self.success_message(spec, file_set))

    def success_message(self, spec: ModelSpec, file_set: GeneratedFileSet) -> str:
        where = display_path(self.output_dir(spec), self.config.project_root)
        return f"{self.label} generated in {where}/"
