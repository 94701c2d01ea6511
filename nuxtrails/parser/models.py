"""Pydantic v2 models for parsed model definitions.

A ``ModelSpec`` is built once per ``generate model`` invocation from the model
name and the ``name:type`` tokens, and drives the naming of every generated
artefact.  Both models are immutable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Prisma scalar types
# ---------------------------------------------------------------------------

DEFAULT_TARGET_TYPE = "String"

PRISMA_TYPE_MAP: dict[str, str] = {
    "string": "String",
    "text": "String",
    "boolean": "Boolean",
    "int": "Int",
    "float": "Float",
    "date": "DateTime",
}

# Prisma type -> HTML input kind used by the generated form component.
_INPUT_KIND_MAP: dict[str, str] = {
    "Boolean": "checkbox",
    "Int": "number",
    "Float": "number",
    "DateTime": "datetime-local",
}


# ---------------------------------------------------------------------------
# Field & model
# ---------------------------------------------------------------------------


class FieldDescriptor(BaseModel):
    """A single declared field of a model."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as typed on the command line")
    source_type: str = Field(default="", description="Raw type token, e.g. 'text'")
    target_type: str = Field(default=DEFAULT_TARGET_TYPE, description="Prisma scalar type")

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``title`` -> ``Title``."""
        return self.name[:1].upper() + self.name[1:]

    @property
    def input_kind(self) -> str:
        """Form control used for this field in generated components."""
        if self.source_type == "text":
            return "textarea"
        return _INPUT_KIND_MAP.get(self.target_type, "text")

    @property
    def schema_line(self) -> str:
        """Line declaring the field inside a Prisma model block."""
        return f"  {self.name} {self.target_type}"


class ModelSpec(BaseModel):
    """Naming and fields for one generated resource.

    ``class_name`` upper-cases the first character only; ``table_slug`` is the
    lower-cased class name with a plain ``s`` appended (``Bus`` -> ``buss``).
    """

    model_config = ConfigDict(frozen=True)

    raw_name: str
    class_name: str
    table_slug: str
    fields: tuple[FieldDescriptor, ...] = Field(default_factory=tuple)

    @property
    def store_hook(self) -> str:
        """Name of the generated Pinia store composable."""
        return f"use{self.class_name}Store"

    @property
    def client_delegate(self) -> str:
        """Prisma client property for this model, e.g. ``prisma.post``."""
        return self.class_name[:1].lower() + self.class_name[1:]

    @property
    def migration_name(self) -> str:
        return f"create-{self.table_slug}"

    @property
    def display_field(self) -> str:
        """Field shown as the item heading: the first String field, else ``id``."""
        for field in self.fields:
            if field.target_type == "String":
                return field.name
        return "id"

    @property
    def has_datetime_input(self) -> bool:
        """Whether the generated form needs the ISO <-> local time helpers."""
        return any(field.input_kind == "datetime-local" for field in self.fields)

    @property
    def routes(self) -> dict[str, str]:
        """Page routes produced for this model."""
        return {
            "List": f"/{self.table_slug}",
            "Create": f"/{self.table_slug}/create",
            "Detail": f"/{self.table_slug}/:id",
            "Edit": f"/{self.table_slug}/:id/edit",
        }
