"""Wrapper around the npm / Prisma command-line toolchain.

Every call blocks until the child process exits and raises ``ToolchainError``
on a non-zero exit.  Output is never parsed: the toolchain is a black box
that either succeeds or fails.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from nuxtrails.config import Config
from nuxtrails.errors import ToolchainError
from nuxtrails.utils import run_command

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


class PrismaToolchain:
    """Runs package installs and Prisma commands inside a project root.

    Args:
        config: Configuration supplying the project root, executables and the
            optional command timeout.
        runner: Coroutine used to execute commands; defaults to
            :func:`nuxtrails.utils.run_command`.
    """

    def __init__(self, config: Config, runner: CommandRunner | None = None) -> None:
        self.config = config
        self.runner = runner or run_command

    async def run(self, *args: str, cwd: Path | None = None) -> None:
        """Run a command and raise ``ToolchainError`` if it fails."""
        cmd = list(args)
        cmd_str = " ".join(cmd)
        returncode, _stdout, stderr = await self.runner(
            cmd,
            cwd=cwd or self.config.project_root,
            timeout=self.config.command_timeout,
            capture=False,
        )
        if returncode != 0:
            message = f"Command failed (exit {returncode}): {cmd_str}"
            if stderr:
                message = f"{message}\n{stderr}"
            raise ToolchainError(message, command=cmd_str, returncode=returncode, stderr=stderr)

    # -- npm ---------------------------------------------------------------

    async def npm_install(self, *packages: str, dev: bool = False, cwd: Path | None = None) -> None:
        """``npm install [-D] <packages>``; no packages installs the lockfile."""
        args = [self.config.npm, "install"]
        if dev:
            args.append("-D")
        args.extend(packages)
        await self.run(*args, cwd=cwd)

    # -- Prisma ------------------------------------------------------------

    async def prisma_init(self, cwd: Path | None = None) -> None:
        await self.run(self.config.npx, "prisma", "init", cwd=cwd)

    async def migrate(self, name: str) -> None:
        """Apply the current schema as a versioned migration called *name*."""
        await self.run(self.config.npx, "prisma", "migrate", "dev", "--name", name)

    async def generate_client(self) -> None:
        """Regenerate the typed Prisma client from the schema."""
        await self.run(self.config.npx, "prisma", "generate")

    # -- Nuxt --------------------------------------------------------------

    async def nuxi_init(self, project_name: str) -> None:
        """Scaffold a new Nuxt application in ``<root>/<project_name>``."""
        await self.run(self.config.npx, "nuxi", "init", project_name)
