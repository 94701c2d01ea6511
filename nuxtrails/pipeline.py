"""nuxtrails pipeline orchestrator and CLI.

Implements the ``generate model`` cascade as an ordered list of steps:

1. SCHEMA     -- append the model block to ``prisma/schema.prisma``.
2. MIGRATE    -- ``prisma migrate dev`` then ``prisma generate``.
3. ROUTES     -- server API handlers under ``server/api/<slug>/``.
4. STORE      -- Pinia store ``stores/<slug>.ts``.
5. PAGES      -- list/create/detail/edit pages under ``pages/<slug>/``.
6. COMPONENTS -- ``<Class>Form.vue`` and ``<Class>Table.vue``.

Steps run strictly in order.  A failing step undoes its own partial work;
the compensations of the steps that already completed then run in reverse
order and the original error (or interruption) is re-raised.

Usage::

    nuxtrails init prisma
    nuxtrails generate model post title:string body:text published:boolean
    nuxtrails new demoapp
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from nuxtrails.config import Config
from nuxtrails.errors import NuxtrailsError
from nuxtrails.parser import ModelSpec, build_model_spec
from nuxtrails.prisma import PrismaToolchain, SchemaWriter
from nuxtrails.scaffolder import (
    ClientAccessorGenerator,
    ComponentGenerator,
    GeneratedFileSet,
    PageGenerator,
    ProjectInitializer,
    ResourceGenerator,
    RouteGenerator,
    StoreGenerator,
    TemplateRenderer,
)
from nuxtrails.utils import console, print_error, print_routes_summary, print_step, print_success, print_warning

# ---------------------------------------------------------------------------
# Step runner
# ---------------------------------------------------------------------------


class CascadeStopped(Exception):
    """Raised by a step to end the cascade early without it being a failure."""


@dataclass
class Step:
    """One unit of the cascade.

    Attributes:
        name: Short name shown in progress output.
        run: Coroutine function performing the step.
        compensate: Optional coroutine function undoing the step; invoked
            only after ``run`` completed and a later step failed.
    """

    name: str
    run: Callable[[], Awaitable[None]]
    compensate: Callable[[], Awaitable[None]] | None = None


class StepRunner:
    """Runs steps sequentially and compensates completed ones on failure."""

    def __init__(self, steps: Sequence[Step]) -> None:
        self.steps = list(steps)
        self.completed: list[str] = []

    async def run(self) -> bool:
        """Execute every step.

        A failing step is expected to clean up after itself; only the steps
        that completed before it are compensated.

        Returns:
            ``True`` if all steps ran, ``False`` if a step stopped the cascade
            with :class:`CascadeStopped`.

        Raises:
            BaseException: Whatever a failing step raised (including
                ``CancelledError`` and ``KeyboardInterrupt``), after
                compensation.
        """
        done: list[Step] = []
        for step in self.steps:
            try:
                await step.run()
            except CascadeStopped:
                return False
            except BaseException:
                # Includes cancellation and Ctrl-C during a long command.
                await self._compensate(done)
                raise
            done.append(step)
            self.completed.append(step.name)
        return True

    async def _compensate(self, done: list[Step]) -> None:
        for step in reversed(done):
            if step.compensate is not None:
                await step.compensate()


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Entry points behind the CLI commands.

    Attributes:
        config: Configuration bound to the project root.
        toolchain: npm / Prisma command wrapper.
        renderer: Template renderer shared by the schema writer and generators.
    """

    def __init__(self, config: Config, toolchain: PrismaToolchain | None = None) -> None:
        self.config = config
        self.toolchain = toolchain or PrismaToolchain(config)
        self.renderer = TemplateRenderer()

    # ------------------------------------------------------------------
    # init prisma
    # ------------------------------------------------------------------

    async def init_prisma(self) -> None:
        """Install Prisma, write the SQLite schema and generate the client."""
        schema = SchemaWriter(self.config, self.renderer)

        print_step("Installing Prisma...")
        await self.toolchain.npm_install("prisma", "@prisma/client")

        print_step("Initializing Prisma...")
        await self.toolchain.prisma_init()
        await schema.write_boilerplate()
        await ClientAccessorGenerator(self.config, self.renderer).generate()

        print_step("Generating Prisma client...")
        await self.toolchain.generate_client()

        print_success("Prisma setup complete!")

    # ------------------------------------------------------------------
    # generate model
    # ------------------------------------------------------------------

    async def generate_model(self, name: str, field_tokens: Sequence[str]) -> bool:
        """Run the full cascade for one model.

        The model name and field tokens are parsed before the Prisma
        bootstrap, so invalid input (e.g. a duplicate field) fails without
        installing packages or writing a schema.

        Returns:
            ``True`` if every stage ran, ``False`` if the model already
            existed in the schema (nothing written).

        Raises:
            FieldSpecError: Invalid model name or duplicate field.
            ToolchainError: A Prisma command failed; earlier stages are undone.
            OSError: A file could not be written; earlier stages are undone.
        """
        spec = build_model_spec(name, field_tokens)

        if not self.config.schema_path.exists():
            print_warning("Prisma not initialized. Running init...")
            await self.init_prisma()

        runner = StepRunner(self.build_steps(spec))
        finished = await runner.run()
        if finished:
            print_routes_summary(spec.routes, title="Your CRUD pages are ready")
        return finished

    def build_steps(self, spec: ModelSpec) -> list[Step]:
        """Assemble the cascade for *spec*."""
        schema = SchemaWriter(self.config, self.renderer)

        async def append_schema() -> None:
            if not await schema.append_model(spec):
                raise CascadeStopped(spec.class_name)

        async def migrate() -> None:
            print_step("Running Prisma migration...")
            await self.toolchain.migrate(spec.migration_name)
            print_step("Generating Prisma client...")
            await self.toolchain.generate_client()
            print_success(f'Model "{spec.class_name}" scaffolded in Prisma!')

        async def warn_migration_applied() -> None:
            print_warning(
                f'Migration "{spec.migration_name}" was applied; '
                "reset the database with `npx prisma migrate reset` if needed."
            )

        steps = [
            Step("schema", append_schema, schema.restore),
            Step("migrate", migrate, warn_migration_applied),
        ]
        for generator in self.resource_generators():
            steps.append(self._generator_step(generator, spec))
        return steps

    def resource_generators(self) -> list[ResourceGenerator]:
        """Generators in cascade order."""
        return [
            RouteGenerator(self.config, self.renderer),
            StoreGenerator(self.config, self.renderer),
            PageGenerator(self.config, self.renderer),
            ComponentGenerator(self.config, self.renderer),
        ]

    @staticmethod
    def _generator_step(generator: ResourceGenerator, spec: ModelSpec) -> Step:
        written: list[GeneratedFileSet] = []

        async def run() -> None:
            print_step(f"Generating {generator.label}...")
            file_set = generator.build(spec)
            # A failed write removes its own partial output.
            await generator.write(spec, file_set)
            written.append(file_set)

        async def compensate() -> None:
            for file_set in written:
                await file_set.rollback()

        return Step(generator.label, run, compensate)

    # ------------------------------------------------------------------
    # new
    # ------------------------------------------------------------------

    async def new_project(self, name: str) -> Path:
        """Bootstrap a new application in ``<root>/<name>``."""
        return await ProjectInitializer(self.config, self.toolchain).create(name)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuxtrails",
        description="nuxtrails -- Rails-style generators for Nuxt + Prisma + Pinia",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nuxtrails init prisma\n"
            "  nuxtrails generate model post title:string body:text published:boolean\n"
            "  nuxtrails new demoapp\n"
        ),
    )
    parser.add_argument(
        "--root", "-C",
        default=".",
        help="Project root to operate in (default: current directory)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    init_parser = sub.add_parser("init", help="Set up Prisma with SQLite")
    init_parser.add_argument("target", choices=["prisma"], help="What to initialize")

    gen_parser = sub.add_parser("generate", help="Generate resource files")
    gen_parser.add_argument("type", help="Resource type (only 'model' is supported)")
    gen_parser.add_argument("name", help="Model name, e.g. post")
    gen_parser.add_argument("fields", nargs="*", help="Fields as name:type")

    new_parser = sub.add_parser("new", help="Create a new Nuxt application")
    new_parser.add_argument("project", help="Directory name of the new project")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the ``nuxtrails`` console script.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    config = Config(project_root=Path(args.root))
    pipeline = Pipeline(config)

    try:
        if args.command == "init":
            asyncio.run(pipeline.init_prisma())
        elif args.command == "generate":
            if args.type != "model":
                console.print(f"Unknown generate type: {escape(args.type)}")
                return 0
            console.print(
                escape(f'Generating model "{args.name}" with fields: {", ".join(args.fields) or "(none)"}')
            )
            asyncio.run(pipeline.generate_model(args.name, args.fields))
        elif args.command == "new":
            asyncio.run(pipeline.new_project(args.project))
    except NuxtrailsError as exc:
        print_error(f"Error: {exc}")
        return 1
    except OSError as exc:
        print_error(f"File system error: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
