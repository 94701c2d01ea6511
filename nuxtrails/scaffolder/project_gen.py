"""New application bootstrap.

Creates a Nuxt application skeleton with Prisma and Pinia installed, then the
folders the resource generators write into.  The target directory must not
exist; if any step after that check fails the partially created directory is
removed before the error propagates.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from nuxtrails.config import Config
from nuxtrails.errors import NuxtrailsError, ProjectExistsError
from nuxtrails.prisma.toolchain import PrismaToolchain
from nuxtrails.scaffolder.client_gen import ClientAccessorGenerator
from nuxtrails.utils import console, ensure_dir, print_step, print_success, print_warning


class ProjectInitializer:
    """Bootstraps ``<root>/<name>`` as a Nuxt + Prisma + Pinia project."""

    BASE_FOLDERS: tuple[str, ...] = ("server/api", "stores", "components")

    def __init__(self, config: Config, toolchain: PrismaToolchain | None = None) -> None:
        self.config = config
        self.toolchain = toolchain or PrismaToolchain(config)

    async def create(self, name: str) -> Path:
        """Create the project and return its path.

        Raises:
            ProjectExistsError: If ``<root>/<name>`` already exists.  Nothing
                is written in that case.
            ToolchainError: If any installer or scaffolder command fails.
        """
        project_path = self.config.project_root / name
        if project_path.exists():
            raise ProjectExistsError(project_path)

        print_step(f"Creating new Nuxt project: {name}")
        try:
            await self._bootstrap(name, project_path)
        except (NuxtrailsError, OSError):
            if project_path.exists():
                print_warning(f"Removing partially created project {project_path}")
                await asyncio.to_thread(shutil.rmtree, project_path)
            raise

        print_success(f"Project {name} created!")
        console.print("[green]Next steps:[/green]")
        console.print(f"[yellow]  cd {name}[/yellow]")
        console.print("[yellow]  nuxtrails generate model Post title:string body:text[/yellow]")
        return project_path

    async def _bootstrap(self, name: str, project_path: Path) -> None:
        await self.toolchain.nuxi_init(name)

        print_step("Installing dependencies...")
        await self.toolchain.npm_install(cwd=project_path)
        await self.toolchain.npm_install("prisma", dev=True, cwd=project_path)
        await self.toolchain.npm_install("@prisma/client", "pinia", cwd=project_path)

        print_step("Initializing Prisma...")
        await self.toolchain.prisma_init(cwd=project_path)

        for folder in self.BASE_FOLDERS:
            await asyncio.to_thread(ensure_dir, project_path / folder)

        await ClientAccessorGenerator(self.config.for_root(project_path)).generate()
