"""Prisma schema file management.

The schema file is append-only from nuxtrails' point of view: new model blocks
go at the end and existing text is never rewritten.  A model is added at most
once, detected by a plain ``model <ClassName>`` substring scan of the file.
"""

from __future__ import annotations

import asyncio

from nuxtrails.config import Config
from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.templates import TemplateRenderer
from nuxtrails.utils import display_path, print_success, print_warning, write_text


class SchemaWriter:
    """Reads and appends model blocks to ``prisma/schema.prisma``."""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self._previous_text: str | None = None

    @property
    def exists(self) -> bool:
        return self.config.schema_path.exists()

    # -- Rendering ---------------------------------------------------------

    def render_boilerplate(self) -> str:
        """Generator + SQLite datasource header of a fresh schema."""
        return self.renderer.render("prisma/schema.prisma.j2", {})

    def render_block(self, spec: ModelSpec) -> str:
        """Model block: ``id``, the declared fields, then the two timestamps."""
        return self.renderer.render("prisma/model.prisma.j2", {"model": spec})

    @staticmethod
    def contains_model(schema_text: str, class_name: str) -> bool:
        """Return ``True`` if *schema_text* already declares *class_name*.

        This is a substring test, so ``model Post`` also matches an existing
        ``model PostTag`` block.
        """
        return f"model {class_name}" in schema_text

    # -- File operations ---------------------------------------------------

    async def read(self) -> str:
        return await asyncio.to_thread(self.config.schema_path.read_text, encoding="utf-8")

    async def write_boilerplate(self) -> None:
        """Overwrite the schema with the boilerplate header."""
        await asyncio.to_thread(write_text, self.config.schema_path, self.render_boilerplate())
        print_success(f"Created {display_path(self.config.schema_path, self.config.project_root)}")

    async def append_model(self, spec: ModelSpec) -> bool:
        """Append the block for *spec* to the schema file.

        Returns:
            ``True`` if the block was written, ``False`` if the model was
            already present (a warning is printed and nothing is written).
        """
        schema_text = await self.read()
        if self.contains_model(schema_text, spec.class_name):
            print_warning(
                f'Model "{spec.class_name}" already exists in {self.config.schema_file}'
            )
            return False

        updated = schema_text.rstrip() + "\n\n" + self.render_block(spec)
        self._previous_text = schema_text
        await asyncio.to_thread(write_text, self.config.schema_path, updated)
        print_success(f'Added model "{spec.class_name}" to {self.config.schema_file}')
        return True

    async def restore(self) -> None:
        """Put back the schema text that :meth:`append_model` replaced."""
        if self._previous_text is None:
            return
        await asyncio.to_thread(write_text, self.config.schema_path, self._previous_text)
        self._previous_text = None
        print_warning(f"Restored {self.config.schema_file}")
