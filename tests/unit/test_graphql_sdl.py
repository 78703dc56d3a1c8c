"""
Unit tests for GraphQL SDL projection.

Tests cover:
- Scalar, enum, array and nested object field types
- Nullability markers
- Type naming and deduplication
- Multi-root schema generation
- Type configs resolved without a registry
- Misuse errors
"""

import pytest

from shapecheck import SchemaError, Settings, validate
from shapecheck.graphql.registry import TypeRegistry
from shapecheck.graphql.sdl import (
    generate_graphql_schema,
    schema_def_to_graphql_type,
    to_graphql_sdl,
    to_graphql_type_config,
)
from shapecheck.schema.types import ObjectDef


class TestToGraphQLSDL:
    """Tests for to_graphql_sdl."""

    def test_simple_type(self):
        """Scalars map to non-null GraphQL scalars."""
        user = validate.object({"id": validate.number().int(), "name": validate.string()})

        assert to_graphql_sdl(user, "User") == "type User {\n  id: Int!\n  name: String!\n}"

    def test_scalars(self):
        """Float, Boolean and nullability markers."""
        schema = validate.object(
            {
                "score": validate.number(),
                "active": validate.boolean(),
                "age": validate.number().int().optional(),
                "bio": validate.string().nullable(),
            }
        )

        assert to_graphql_sdl(schema, "Profile") == (
            "type Profile {\n"
            "  score: Float!\n"
            "  active: Boolean!\n"
            "  age: Int\n"
            "  bio: String\n"
            "}"
        )

    def test_enum_field(self):
        """Enums become a named enum registered before the type."""
        post = validate.object(
            {
                "id": validate.number().int(),
                "status": validate.enum(["draft", "published"]),
            }
        )

        assert to_graphql_sdl(post, "Post") == (
            "enum StatusEnum {\n"
            "  DRAFT\n"
            "  PUBLISHED\n"
            "}\n"
            "\n"
            "type Post {\n"
            "  id: Int!\n"
            "  status: StatusEnum!\n"
            "}"
        )

    def test_enum_values_sanitized(self):
        """Enum values are upper-cased with invalid characters replaced."""
        schema = validate.object({"state": validate.enum(["in-progress", "done now", "v2"])})

        sdl = to_graphql_sdl(schema, "Task")

        assert "enum StateEnum {\n  IN_PROGRESS\n  DONE_NOW\n  V2\n}" in sdl

    def test_optional_enum_field(self):
        """Optional enums drop the non-null marker."""
        schema = validate.object({"role": validate.enum(["admin"]).optional()})

        assert "  role: RoleEnum\n" in to_graphql_sdl(schema, "User")

    def test_arrays(self):
        """Arrays wrap a non-null item type."""
        schema = validate.object(
            {
                "tags": validate.array(validate.string()),
                "counts": validate.array(validate.number().int()).optional(),
                "notes": validate.array(validate.string().nullable()),
            }
        )

        assert to_graphql_sdl(schema, "Blog") == (
            "type Blog {\n"
            "  tags: [String!]!\n"
            "  counts: [Int!]\n"
            "  notes: [String!]!\n"
            "}"
        )

    def test_nested_object(self):
        """Nested objects are named after their field and emitted first."""
        author = validate.object(
            {"id": validate.number().int(), "bio": validate.string().optional()}
        )
        article = validate.object({"title": validate.string(), "author": author})

        assert to_graphql_sdl(article, "Article") == (
            "type Author {\n"
            "  id: Int!\n"
            "  bio: String\n"
            "}\n"
            "\n"
            "type Article {\n"
            "  title: String!\n"
            "  author: Author!\n"
            "}"
        )

    def test_array_of_objects_uses_field_name(self):
        """Array items inherit the field name for nested naming."""
        address = validate.object({"city": validate.string()})
        schema = validate.object({"addresses": validate.array(address)})

        assert to_graphql_sdl(schema, "Profile") == (
            "type Addresses {\n"
            "  city: String!\n"
            "}\n"
            "\n"
            "type Profile {\n"
            "  addresses: [Addresses!]!\n"
            "}"
        )

    def test_deep_nesting_order(self):
        """Deepest definitions are registered first."""
        schema = validate.object(
            {
                "meta": validate.object(
                    {"kind": validate.enum(["a", "b"]), "version": validate.number().int()}
                ),
            }
        )

        sdl = to_graphql_sdl(schema, "Document")
        blocks = sdl.split("\n\n")

        assert [block.split(" ")[1] for block in blocks] == ["KindEnum", "Meta", "Document"]

    def test_field_name_capitalized_without_lowercasing(self):
        """Only the first character is upper-cased."""
        schema = validate.object({"shippingAddress": validate.object({"zip": validate.string()})})

        assert "type ShippingAddress {" in to_graphql_sdl(schema, "Order")

    def test_same_field_name_emitted_once(self):
        """A nested name reached twice is emitted once."""
        inner = validate.object({"x": validate.number()})
        schema = validate.object(
            {"point": inner, "points": validate.array(validate.object({"point": inner}))}
        )

        sdl = to_graphql_sdl(schema, "Shape")

        assert sdl.count("type Point {") == 1

    def test_deterministic(self):
        """Projecting twice yields identical output."""
        schema = validate.object(
            {
                "status": validate.enum(["on", "off"]),
                "child": validate.object({"name": validate.string()}),
            }
        )

        assert to_graphql_sdl(schema, "Root") == to_graphql_sdl(schema, "Root")

    def test_non_object_root_raises(self):
        """Only object schemas can be projected."""
        with pytest.raises(SchemaError, match="Only object schemas are supported") as exc_info:
            to_graphql_sdl(validate.string(), "Name")

        assert exc_info.value.code == "SCHEMA_ERROR"
        assert exc_info.value.kind == "string"

    def test_nested_type_named_like_root_raises(self):
        """A nested type that takes the root's name is rejected, not dropped."""
        schema = validate.object(
            {"name": validate.string(), "user": validate.object({"id": validate.number().int()})}
        )

        with pytest.raises(SchemaError, match="Type name 'User' is already used"):
            to_graphql_sdl(schema, "User")

    def test_nested_enum_named_like_root_raises(self):
        """An enum whose generated name matches the root is rejected."""
        schema = validate.object({"status": validate.enum(["on", "off"])})

        with pytest.raises(SchemaError, match="already used"):
            to_graphql_sdl(schema, "StatusEnum")

    def test_custom_settings(self):
        """Indent and enum suffix come from settings."""
        settings = Settings(sdl_indent=4, enum_suffix="Kind")
        schema = validate.object({"status": validate.enum(["on"])})

        assert to_graphql_sdl(schema, "Switch", settings=settings) == (
            "enum StatusKind {\n"
            "    ON\n"
            "}\n"
            "\n"
            "type Switch {\n"
            "    status: StatusKind!\n"
            "}"
        )


class TestGenerateGraphQLSchema:
    """Tests for generate_graphql_schema."""

    def test_multiple_roots(self):
        """Each root type is emitted in order."""
        schemas = {
            "User": validate.object({"id": validate.number().int()}),
            "Post": validate.object({"title": validate.string()}),
        }

        assert generate_graphql_schema(schemas) == (
            "type User {\n  id: Int!\n}\n\ntype Post {\n  title: String!\n}"
        )

    def test_shared_enum_emitted_once(self):
        """Roots sharing a field name and enum reuse one definition."""
        schemas = {
            "User": validate.object(
                {"id": validate.number().int(), "role": validate.enum(["admin", "user"])}
            ),
            "Invite": validate.object({"role": validate.enum(["admin", "user"])}),
        }

        sdl = generate_graphql_schema(schemas)

        assert sdl.count("enum RoleEnum") == 1
        assert sdl == (
            "enum RoleEnum {\n  ADMIN\n  USER\n}\n"
            "\n"
            "type User {\n  id: Int!\n  role: RoleEnum!\n}\n"
            "\n"
            "type Invite {\n  role: RoleEnum!\n}"
        )

    def test_empty_mapping(self):
        """No schemas yields an empty document."""
        assert generate_graphql_schema({}) == ""

    def test_root_name_claimed_by_earlier_nested_type_raises(self):
        """A later root cannot reuse a name an earlier root's nested type took."""
        schemas = {
            "Post": validate.object({"author": validate.object({"id": validate.number().int()})}),
            "Author": validate.object({"name": validate.string()}),
        }

        with pytest.raises(SchemaError, match="Type name 'Author' is already used"):
            generate_graphql_schema(schemas)

    def test_non_object_entry_raises(self):
        """Every entry must be an object schema."""
        with pytest.raises(SchemaError):
            generate_graphql_schema({"Tags": validate.array(validate.string())})


class TestSchemaDefToGraphQLType:
    """Tests for schema_def_to_graphql_type."""

    def test_scalar_without_registry(self):
        """Scalars need no registry."""
        assert schema_def_to_graphql_type(validate.string().min(1).definition) == "String!"
        assert schema_def_to_graphql_type(validate.number().int().definition) == "Int!"

    def test_anonymous_enum_names(self):
        """Without a field name, enum names are minted from 'Enum'."""
        registry = TypeRegistry()
        status = validate.enum(["a"]).definition

        assert schema_def_to_graphql_type(status, None, registry) == "Enum!"
        assert schema_def_to_graphql_type(status, None, registry) == "Enum1!"
        assert registry.names() == ["Enum", "Enum1"]

    def test_anonymous_object_names(self):
        """Without a field name, object names are minted from 'NestedType'."""
        registry = TypeRegistry()
        point = validate.object({"x": validate.number()}).nullable().definition

        assert schema_def_to_graphql_type(point, None, registry) == "NestedType"
        assert registry.get_all() == ["type NestedType {\n  x: Float!\n}"]

    def test_enum_without_registry_is_union(self):
        """Without a registry enums render as a quoted union."""
        status = validate.enum(["draft", "published"]).definition

        assert schema_def_to_graphql_type(status, "status") == '"draft" | "published"'

    def test_object_without_registry_is_json(self):
        """Without a registry objects render as JSON."""
        point = validate.object({"x": validate.number()}).definition

        assert schema_def_to_graphql_type(point, "point") == "JSON"

    def test_malformed_object_definition_raises(self):
        """An object definition without a field mapping is rejected."""
        definition = ObjectDef()
        object.__setattr__(definition, "fields", None)

        with pytest.raises(SchemaError, match="Invalid object schema definition"):
            schema_def_to_graphql_type(definition, "broken", TypeRegistry())


class TestToGraphQLTypeConfig:
    """Tests for to_graphql_type_config."""

    def test_type_config(self):
        """Fields map to type strings resolved without a registry."""
        schema = validate.object(
            {
                "name": validate.string(),
                "age": validate.number().int().optional(),
                "meta": validate.object({"a": validate.string()}),
            }
        )

        assert to_graphql_type_config(schema, "User") == {
            "name": "User",
            "fields": {
                "name": {"type": "String!"},
                "age": {"type": "Int"},
                "meta": {"type": "JSON"},
            },
        }

    def test_non_object_raises(self):
        """Only object schemas have type configs."""
        with pytest.raises(SchemaError, match="type configs"):
            to_graphql_type_config(validate.boolean(), "Flag")
