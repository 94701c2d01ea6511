"""Nuxt page generation.

Pages live under ``pages/<slug>/``: a list, a create form, a detail view and
(one level deeper, under ``[id]/``) an edit form.  The create and edit pages
render the model's generated form component, the list page its table.
"""

from __future__ import annotations

from pathlib import Path

from nuxtrails.parser.models import ModelSpec
from nuxtrails.scaffolder.generator import ResourceGenerator


class PageGenerator(ResourceGenerator):
    """Generates the list/create/detail/edit pages for a model."""

    _TEMPLATES: dict[str, str] = {
        "pages/index.vue.j2": "index.vue",
        "pages/create.vue.j2": "create.vue",
        "pages/[id].vue.j2": "[id].vue",
        "pages/[id]/edit.vue.j2": "[id]/edit.vue",
    }
    label = "Nuxt pages"

    def output_dir(self, spec: ModelSpec) -> Path:
        return self.config.pages_path / spec.table_slug
