"""Vue component generation.

``<Class>Form.vue`` emits one labelled control per declared field (checkbox
for booleans, textarea for ``text``, number/date inputs where they apply) and
``<Class>Table.vue`` one column per field between the id and the actions.
"""

from __future__ import annotations

from pathlib import Path

from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.fileset import GeneratedFileSet
from nuxtrails.scaffolder.generator import ResourceGenerator


class ComponentGenerator(ResourceGenerator):
    """Generates the form and table components for a model."""

    _TEMPLATES: dict[str, str] = {
        "components/Form.vue.j2": "{class_name}Form.vue",
        "components/Table.vue.j2": "{class_name}Table.vue",
    }
    label = "Components"

    def output_dir(self, spec: ModelSpec) -> Path:
        return self.config.components_path

    def success_message(self, spec: ModelSpec, file_set: GeneratedFileSet) -> str:
        names = ", ".join(path.name for path in file_set.paths())
        return f"{self.label} generated: {names}"
