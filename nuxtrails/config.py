"""nuxtrails configuration.

Typed configuration for the generators and the toolchain wrapper. The project
root is an explicit value threaded through every component instead of being
taken from the process working directory, so the whole cascade can run against
any directory (tests use a temporary one).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global nuxtrails configuration.

    Instances are created once by the CLI entry point and then passed to the
    schema writer, the toolchain wrapper and every generator.
    """

    project_root: Path = Field(default=Path("."))
    schema_file: str = Field(default="prisma/schema.prisma")

    server_dir: str = Field(default="server")
    api_dir: str = Field(default="server/api")
    stores_dir: str = Field(default="stores")
    pages_dir: str = Field(default="pages")
    components_dir: str = Field(default="components")

    npm: str = Field(default="npm", description="npm executable")
    npx: str = Field(default="npx", description="npx executable")
    command_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Per-command timeout in seconds; None waits forever",
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def schema_path(self) -> Path:
        """Path to the persisted Prisma schema."""
        return self.project_root / self.schema_file

    @property
    def api_path(self) -> Path:
        """Root directory for generated server route handlers."""
        return self.project_root / self.api_dir

    @property
    def stores_path(self) -> Path:
        """Directory holding the generated Pinia stores."""
        return self.project_root / self.stores_dir

    @property
    def pages_path(self) -> Path:
        """Directory holding the generated page templates."""
        return self.project_root / self.pages_dir

    @property
    def components_path(self) -> Path:
        """Directory holding the generated Vue components."""
        return self.project_root / self.components_dir

    @property
    def prisma_client_path(self) -> Path:
        """Path to the shared Prisma client accessor imported by every route."""
        return self.project_root / self.server_dir / "prisma.ts"

    def for_root(self, root: Path) -> "Config":
        """Return a copy of this configuration bound to another project root."""
        return self.model_copy(update={"project_root": Path(root)})
