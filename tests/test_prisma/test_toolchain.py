"""Tests for the npm / Prisma command wrapper (nuxtrails.prisma.toolchain).

Covers:
- Exact command lines for every wrapped operation
- Working directory and timeout forwarding
- ToolchainError on non-zero exit
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from nuxtrails.config import Config
from nuxtrails.errors import ToolchainError
from nuxtrails.prisma import PrismaToolchain

pytestmark = pytest.mark.unit


class TestCommands:
    @pytest.mark.asyncio
    async def test_migrate(self, toolchain, fake_runner, project_root):
        await toolchain.migrate("create-posts")
        assert fake_runner.commands == ["npx prisma migrate dev --name create-posts"]
        assert fake_runner.calls[0][1] == project_root

    @pytest.mark.asyncio
    async def test_generate_client(self, toolchain, fake_runner):
        await toolchain.generate_client()
        assert fake_runner.commands == ["npx prisma generate"]

    @pytest.mark.asyncio
    async def test_npm_install_variants(self, toolchain, fake_runner, tmp_path):
        await toolchain.npm_install(cwd=tmp_path)
        await toolchain.npm_install("prisma", dev=True)
        await toolchain.npm_install("@prisma/client", "pinia")
        assert fake_runner.commands == [
            "npm install",
            "npm install -D prisma",
            "npm install @prisma/client pinia",
        ]
        assert fake_runner.calls[0][1] == tmp_path

    @pytest.mark.asyncio
    async def test_nuxi_init(self, toolchain, fake_runner, project_root):
        await toolchain.nuxi_init("demoapp")
        assert fake_runner.commands == ["npx nuxi init demoapp"]
        assert (project_root / "demoapp").is_dir()

    @pytest.mark.asyncio
    async def test_custom_executables(self, project_root, fake_runner):
        config = Config(project_root=project_root, npx="pnpx", npm="pnpm")
        toolchain = PrismaToolchain(config, runner=fake_runner)
        await toolchain.generate_client()
        await toolchain.npm_install("pinia")
        assert fake_runner.commands == ["pnpx prisma generate", "pnpm install pinia"]


class TestRunnerContract:
    @pytest.mark.asyncio
    async def test_streams_inherited_and_timeout_forwarded(self, project_root):
        runner = AsyncMock(return_value=(0, "", ""))
        config = Config(project_root=project_root, command_timeout=30)
        await PrismaToolchain(config, runner=runner).generate_client()

        runner.assert_awaited_once_with(
            ["npx", "prisma", "generate"],
            cwd=project_root,
            timeout=30,
            capture=False,
        )

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, config):
        runner = AsyncMock(return_value=(0, "", ""))
        await PrismaToolchain(config, runner=runner).generate_client()
        assert runner.await_args.kwargs["timeout"] is None


class TestFailures:
    @pytest.mark.asyncio
    async def test_non_zero_exit_raises(self, toolchain, fake_runner):
        fake_runner.fail_on = "migrate"
        with pytest.raises(ToolchainError) as exc_info:
            await toolchain.migrate("create-posts")

        err = exc_info.value
        assert err.returncode == 1
        assert err.command == "npx prisma migrate dev --name create-posts"
        assert "simulated failure" in err.stderr
        assert "exit 1" in str(err)

    @pytest.mark.asyncio
    async def test_timeout_is_a_failure(self, config):
        runner = AsyncMock(return_value=(-1, "", "Command timed out after 5s: npx prisma generate"))
        with pytest.raises(ToolchainError, match="timed out"):
            await PrismaToolchain(config, runner=runner).generate_client()

    def test_default_runner(self, config):
        from nuxtrails.utils import run_command

        assert PrismaToolchain(config).runner is run_command
