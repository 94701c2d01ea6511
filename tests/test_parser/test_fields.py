"""Unit tests for field token parsing (nuxtrails.parser).

Tests cover:
- map_prisma_type for every known type, unknown and empty types
- parse_field_tokens ordering, missing ``:``, splitting on the first ``:``
- duplicate field rejection
- build_model_spec naming (class name, table slug) and derived helpers
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nuxtrails.errors import FieldSpecError
from nuxtrails.parser import build_model_spec, map_prisma_type, parse_field_tokens
from nuxtrails.parser.fields import class_name_for, parse_field_token, table_slug_for

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# map_prisma_type
# ---------------------------------------------------------------------------


class TestMapPrismaType:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("string", "String"),
            ("text", "String"),
            ("boolean", "Boolean"),
            ("int", "Int"),
            ("float", "Float"),
            ("date", "DateTime"),
        ],
    )
    def test_known_types(self, source, expected):
        assert map_prisma_type(source) == expected

    @pytest.mark.parametrize("source", ["uuid", "json", "", "integer", "bool"])
    def test_unknown_types_fall_back_to_string(self, source):
        assert map_prisma_type(source) == "String"

    def test_lookup_is_case_sensitive(self):
        assert map_prisma_type("Boolean") == "String"
        assert map_prisma_type("INT") == "String"


# ---------------------------------------------------------------------------
# parse_field_tokens
# ---------------------------------------------------------------------------


class TestParseFieldTokens:
    def test_preserves_order(self):
        fields = parse_field_tokens(["title:string", "body:text", "published:boolean"])
        assert [f.name for f in fields] == ["title", "body", "published"]
        assert [f.target_type for f in fields] == ["String", "String", "Boolean"]

    def test_token_without_colon(self):
        field = parse_field_token("slug")
        assert field.name == "slug"
        assert field.source_type == ""
        assert field.target_type == "String"

    def test_splits_on_first_colon_only(self):
        field = parse_field_token("meta:int:extra")
        assert field.name == "meta"
        assert field.source_type == "int:extra"
        assert field.target_type == "String"

    def test_empty_token_list(self):
        assert parse_field_tokens([]) == ()

    def test_duplicate_names_rejected(self):
        with pytest.raises(FieldSpecError, match="title"):
            parse_field_tokens(["title:string", "body:text", "title:int"])

    def test_names_are_not_validated_as_identifiers(self):
        fields = parse_field_tokens(["first-name:string"])
        assert fields[0].name == "first-name"

    def test_descriptors_are_immutable(self):
        field = parse_field_token("title:string")
        with pytest.raises(ValidationError):
            field.name = "other"


class TestFieldDescriptorHelpers:
    def test_label(self):
        assert parse_field_token("title:string").label == "Title"

    @pytest.mark.parametrize(
        ("token", "kind"),
        [
            ("title:string", "text"),
            ("body:text", "textarea"),
            ("published:boolean", "checkbox"),
            ("count:int", "number"),
            ("price:float", "number"),
            ("due:date", "datetime-local"),
            ("other:weird", "text"),
        ],
    )
    def test_input_kind(self, token, kind):
        assert parse_field_token(token).input_kind == kind

    def test_schema_line(self):
        assert parse_field_token("published:boolean").schema_line == "  published Boolean"


# ---------------------------------------------------------------------------
# build_model_spec
# ---------------------------------------------------------------------------


class TestBuildModelSpec:
    def test_post(self, post_spec):
        assert post_spec.raw_name == "post"
        assert post_spec.class_name == "Post"
        assert post_spec.table_slug == "posts"
        assert len(post_spec.fields) == 3

    def test_has_datetime_input(self, post_spec, typed_spec):
        assert post_spec.has_datetime_input is False
        assert typed_spec.has_datetime_input is True

    def test_only_first_character_is_capitalised(self):
        spec = build_model_spec("blogPost")
        assert spec.class_name == "BlogPost"
        assert spec.table_slug == "blogposts"

    def test_already_capitalised(self):
        assert build_model_spec("Post").class_name == "Post"

    def test_plural_is_a_plain_suffix(self):
        assert build_model_spec("Bus").table_slug == "buss"
        assert build_model_spec("category").table_slug == "categorys"

    def test_empty_name_rejected(self):
        with pytest.raises(FieldSpecError):
            build_model_spec("")

    def test_duplicate_field_rejected(self):
        with pytest.raises(FieldSpecError):
            build_model_spec("post", ["title", "title:text"])

    def test_naming_helpers(self):
        assert class_name_for("x") == "X"
        assert table_slug_for("PostTag") == "posttags"

    def test_derived_names(self, post_spec):
        assert post_spec.store_hook == "usePostStore"
        assert post_spec.client_delegate == "post"
        assert post_spec.migration_name == "create-posts"

    def test_client_delegate_lowercases_first_char_only(self):
        assert build_model_spec("blogPost").client_delegate == "blogPost"

    def test_display_field_is_first_string_field(self, post_spec):
        assert post_spec.display_field == "title"

    def test_display_field_skips_non_string(self):
        spec = build_model_spec("score", ["value:int", "label:text"])
        assert spec.display_field == "label"

    def test_display_field_defaults_to_id(self):
        spec = build_model_spec("counter", ["value:int"])
        assert spec.display_field == "id"

    def test_routes(self, post_spec):
        assert post_spec.routes == {
            "List": "/posts",
            "Create": "/posts/create",
            "Detail": "/posts/:id",
            "Edit": "/posts/:id/edit",
        }
