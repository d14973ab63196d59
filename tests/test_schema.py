from typing import Literal

from pydantic import BaseModel

from openapi_registry.schema import SchemaCompiler, is_schema


class Tag(BaseModel):
    label: str


class Post(BaseModel):
    title: str
    tags: list[Tag] = []


class TestIsSchema:
    def test_model_class(self):
        assert is_schema(Post) is True

    def test_parametrised_types(self):
        assert is_schema(list[Post]) is True
        assert is_schema(Literal["a", "b"]) is True

    def test_plain_values_are_not_schemas(self):
        assert is_schema({"schema": Post}) is False
        assert is_schema(None) is False
        assert is_schema("Post") is False


class TestSchemaCompiler:
    def test_compile_flat_model(self):
        compiled = SchemaCompiler().compile(Tag)
        assert compiled["type"] == "object"
        assert compiled["properties"]["label"]["type"] == "string"
        assert compiled["required"] == ["label"]

    def test_nested_definitions_are_hoisted(self):
        compiler = SchemaCompiler()
        compiled = compiler.compile(Post)
        assert "$defs" not in compiled
        assert compiled["properties"]["tags"]["items"] == {"$ref": "#/components/schemas/Tag"}
        assert "Tag" in compiler.definitions

    def test_compile_plain_types(self):
        compiler = SchemaCompiler()
        assert compiler.compile(str) == {"type": "string"}
        assert compiler.compile(list[Tag]) == {"type": "array", "items": {"$ref": "#/components/schemas/Tag"}}
        assert compiler.compile(Literal["a", "b"])["enum"] == ["a", "b"]

    def test_drain_empties_collection(self):
        compiler = SchemaCompiler()
        compiler.compile(Post)
        drained = compiler.drain()
        assert list(drained) == ["Tag"]
        assert compiler.definitions == {}
