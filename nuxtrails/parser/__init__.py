"""Model definition parser.

Turns a model name and ``name:type`` tokens into an immutable ``ModelSpec``.

Usage::

    from nuxtrails.parser import build_model_spec

    spec = build_model_spec("post", ["title:string", "body:text"])
    print(spec.class_name, spec.table_slug)  # Post posts
"""

from nuxtrails.parser.fields import build_model_spec, map_prisma_type, parse_field_tokens
from nuxtrails.parser.models import FieldDescriptor, ModelSpec

__all__ = [
    "build_model_spec",
    "map_prisma_type",
    "parse_field_tokens",
    "FieldDescriptor",
    "ModelSpec",
]
