"""Pinia store generation.

The generated store keeps the full collection in state and re-fetches it after
every mutation (``create``, ``update``, ``delete``) instead of patching local
state.  ``findOne`` reads a single row without touching the state.
"""

from __future__ import annotations

from pathlib import Path

from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.fileset import GeneratedFileSet
from nuxtrails.scaffolder.generator import ResourceGenerator


class StoreGenerator(ResourceGenerator):
    """Generates ``stores/<slug>.ts``."""

    _TEMPLATES: dict[str, str] = {
        "stores/store.ts.j2": "{slug}.ts",
    }
    label = "Pinia store"

    def output_dir(self, spec: ModelSpec) -> Path:
        return self.config.stores_path

    def success_message(self, spec: ModelSpec, file_set: GeneratedFileSet) -> str:
        return f"{self.label} generated at {next(iter(file_set.files))}"
