"""Shared pytest fixtures for the nuxtrails test suite.

Provides reusable fixtures for:
- A temporary project root and a ``Config`` bound to it
- A fake command runner standing in for npm / npx
- Pre-built model specs
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from nuxtrails.config import Config
from nuxtrails.parser import ModelSpec, build_model_spec
from nuxtrails.prisma import PrismaToolchain


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project root (auto-cleanup)."""
    root = tmp_path / "app"
    root.mkdir()
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """Configuration bound to the temporary project root."""
    return Config(project_root=project_root)


# ---------------------------------------------------------------------------
# Fake toolchain
# ---------------------------------------------------------------------------

PRISMA_INIT_SCHEMA = """\
generator client {
  provider = "prisma-client-js"
}

datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}
"""


class FakeRunner:
    """Records commands instead of running them.

    Simulates the file-system side effects the real tools have on a project:
    ``npx nuxi init <name>`` creates ``<cwd>/<name>`` and ``npx prisma init``
    creates ``<cwd>/prisma/schema.prisma``.

    Attributes:
        calls: ``(cmd, cwd)`` tuples in call order.
        fail_on: Substring of the joined command that makes it exit 1.
        raise_on: ``(substring, exception)``; a matching command raises the
            exception instead of returning, as an interrupted run would.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on: str | None = None
        self.raise_on: tuple[str, BaseException] | None = None

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _cwd in self.calls]

    async def __call__(
        self,
        cmd: list[str],
        cwd: Any = None,
        timeout: int | None = None,
        capture: bool = True,
    ) -> tuple[int, str, str]:
        cwd_path = Path(cwd) if cwd else Path.cwd()
        self.calls.append((list(cmd), cwd_path))
        joined = " ".join(cmd)
        if self.raise_on and self.raise_on[0] in joined:
            raise self.raise_on[1]
        if self.fail_on and self.fail_on in joined:
            return (1, "", f"simulated failure: {joined}")

        if cmd[1:3] == ["nuxi", "init"]:
            (cwd_path / cmd[3]).mkdir(parents=True)
        elif cmd[1:3] == ["prisma", "init"]:
            schema = cwd_path / "prisma" / "schema.prisma"
            schema.parent.mkdir(parents=True, exist_ok=True)
            schema.write_text(PRISMA_INIT_SCHEMA, encoding="utf-8")
        return (0, "", "")


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def toolchain(config: Config, fake_runner: FakeRunner) -> PrismaToolchain:
    """A PrismaToolchain whose commands go to the fake runner."""
    return PrismaToolchain(config, runner=fake_runner)


# ---------------------------------------------------------------------------
# Model specs
# ---------------------------------------------------------------------------

@pytest.fixture
def post_spec() -> ModelSpec:
    """The canonical example model."""
    return build_model_spec("post", ["title:string", "body:text", "published:boolean"])


@pytest.fixture
def typed_spec() -> ModelSpec:
    """A model using every supported field type."""
    return build_model_spec(
        "event",
        [
            "name:string",
            "notes:text",
            "active:boolean",
            "seats:int",
            "price:float",
            "startsAt:date",
        ],
    )
