"""Nitro server route generation.

Writes the five CRUD handlers for a model under ``server/api/<slug>/``:

- ``index.get.ts``     -- list all rows
- ``create.post.ts``   -- create a row from the request body
- ``[id].get.ts``      -- fetch one row by numeric id
- ``[id].put.ts``      -- update one row by numeric id
- ``[id].delete.ts``   -- delete one row by numeric id

Every handler imports the shared client from ``@/server/prisma``.
"""

from __future__ import annotations

from pathlib import Path

from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.generator import ResourceGenerator


class RouteGenerator(ResourceGenerator):
    """Generates the server API route handlers for a model."""

    _TEMPLATES: dict[str, str] = {
        "routes/index.get.ts.j2": "index.get.ts",
        "routes/create.post.ts.j2": "create.post.ts",
        "routes/[id].get.ts.j2": "[id].get.ts",
        "routes/[id].put.ts.j2": "[id].put.ts",
        "routes/[id].delete.ts.j2": "[id].delete.ts",
    }
    label = "API routes"

    def output_dir(self, spec: ModelSpec) -> Path:
        return self.config.api_path / spec.table_slug
