"""Compile validation schemas into JSON-Schema fragments."""

from typing import Any, get_origin

from pydantic import BaseModel, TypeAdapter

REF_TEMPLATE = "#/components/schemas/{model}"


def is_schema(obj: Any) -> bool:
    """True for a class or a parametrised type such as ``list[Item]``."""
    return isinstance(obj, type) or get_origin(obj) is not None


class SchemaCompiler:
    """Turns pydantic models and plain types into structural schemas.

    Nested model definitions are pulled out of each fragment and kept in
    ``definitions`` so they can live under ``components.schemas``.
    """

    def __init__(self):
        self.definitions: dict[str, dict] = {}

    def compile(self, schema: Any) -> dict:
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            compiled = schema.model_json_schema(ref_template=REF_TEMPLATE)
        else:
            compiled = TypeAdapter(schema).json_schema(ref_template=REF_TEMPLATE)

        self.definitions.update(compiled.pop("$defs", {}))
        return compiled

    def drain(self) -> dict[str, dict]:
        """Return the collected definitions and start a fresh collection."""
        definitions, self.definitions = self.definitions, {}
        return definitions
