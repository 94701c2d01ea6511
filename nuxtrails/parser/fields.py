"""Field token parsing.

Turns raw ``name:type`` command-line tokens into ``FieldDescriptor`` objects
and derives the ``ModelSpec`` naming from the model name.
"""

from __future__ import annotations

from collections.abc import Iterable

from nuxtrails.errors import FieldSpecError
from nuxtrails.parser.models import (
    DEFAULT_TARGET_TYPE,
    PRISMA_TYPE_MAP,
    FieldDescriptor,
    ModelSpec,
)


def map_prisma_type(source_type: str) -> str:
    """Map a field type token to its Prisma scalar type.

    The lookup is exact and case-sensitive; anything unrecognised (including
    an empty type) falls back to ``String``.
    """
    return PRISMA_TYPE_MAP.get(source_type, DEFAULT_TARGET_TYPE)


def parse_field_token(token: str) -> FieldDescriptor:
    """Parse a single ``name:type`` token, splitting on the first ``:``."""
    name, _, source_type = token.partition(":")
    return FieldDescriptor(
        name=name,
        source_type=source_type,
        target_type=map_prisma_type(source_type),
    )


def parse_field_tokens(tokens: Iterable[str]) -> tuple[FieldDescriptor, ...]:
    """Parse field tokens in order.

    Raises:
        FieldSpecError: If the same field name is declared twice.
    """
    fields: list[FieldDescriptor] = []
    seen: set[str] = set()
    for token in tokens:
        field = parse_field_token(token)
        if field.name in seen:
            raise FieldSpecError(f'Duplicate field "{field.name}" in model definition.')
        seen.add(field.name)
        fields.append(field)
    return tuple(fields)


def class_name_for(raw_name: str) -> str:
    """Upper-case the first character and keep the rest unchanged."""
    return raw_name[:1].upper() + raw_name[1:]


def table_slug_for(class_name: str) -> str:
    """Lower-case the class name and append ``s``."""
    return class_name.lower() + "s"


def build_model_spec(raw_name: str, tokens: Iterable[str] = ()) -> ModelSpec:
    """Build the ``ModelSpec`` for *raw_name* and its field tokens.

    Raises:
        FieldSpecError: If the model name is empty or a field is duplicated.
    """
    if not raw_name:
        raise FieldSpecError("Model name must not be empty.")

    class_name = class_name_for(raw_name)
    return ModelSpec(
        raw_name=raw_name,
        class_name=class_name,
        table_slug=table_slug_for(class_name),
        fields=parse_field_tokens(tokens),
    )
