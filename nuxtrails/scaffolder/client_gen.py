"""Shared Prisma client accessor.

Every generated route imports ``prisma`` from ``@/server/prisma``; this module
writes that file.  It is created once and never overwritten, so a project can
customise its client.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from nuxtrails.config import Config
from nuxtrails.scaffolder.templates import TemplateRenderer
from nuxtrails.utils import display_path, print_success, write_text


class ClientAccessorGenerator:
    """Writes ``server/prisma.ts``, a process-wide ``PrismaClient`` singleton."""

    TEMPLATE = "prisma/client.ts.j2"

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    @property
    def path(self) -> Path:
        return self.config.prisma_client_path

    async def generate(self) -> bool:
        """Write the accessor unless the project already has one.

        Returns:
            ``True`` if the file was written, ``False`` if it already existed.
        """
        if self.path.exists():
            return False
        content = self.renderer.render(self.TEMPLATE, {})
        await asyncio.to_thread(write_text, self.path, content)
        print_success(f"Created {display_path(self.path, self.config.project_root)}")
        return True
