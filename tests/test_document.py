from openapi_registry.config import Contact, License, OpenApiRegistryConfig, Server
from openapi_registry.document import DocumentBuilder, to_openapi_path


class TestToOpenApiPath:
    def test_converts_each_parameter(self):
        assert to_openapi_path("/users/:id/orders/:orderId") == "/users/{id}/orders/{orderId}"

    def test_static_segments_unchanged(self):
        assert to_openapi_path("/health/live") == "/health/live"

    def test_idempotent(self):
        once = to_openapi_path("/items/:itemId")
        assert to_openapi_path(once) == once == "/items/{itemId}"


class TestInitialize:
    def test_defaults(self):
        doc = DocumentBuilder().get_document()
        assert doc["openapi"] == "3.0.3"
        assert doc["info"] == {
            "title": "API Documentation",
            "version": "1.0.0",
            "description": "Generated API documentation",
        }
        assert doc["servers"] == [{"url": "http://localhost:3030"}]
        assert doc["paths"] == {}
        assert doc["components"] == {"schemas": {}, "securitySchemes": {}}

    def test_config_values(self):
        config = OpenApiRegistryConfig(
            title="Pets",
            version="2.0.0",
            contact=Contact(name="Team"),
            license=License(name="MIT"),
            servers=[Server(url="https://api.example.com")],
        )
        doc = DocumentBuilder(config).get_document()
        assert doc["info"]["title"] == "Pets"
        assert doc["info"]["version"] == "2.0.0"
        assert doc["info"]["contact"] == {"name": "Team"}
        assert doc["info"]["license"] == {"name": "MIT"}
        assert doc["servers"] == [{"url": "https://api.example.com"}]

    def test_empty_title_falls_back(self):
        doc = DocumentBuilder(OpenApiRegistryConfig(title="")).get_document()
        assert doc["info"]["title"] == "API Documentation"
        assert "contact" not in doc["info"]
        assert "license" not in doc["info"]


class TestRegistration:
    def test_methods_accumulate_on_same_path(self):
        builder = DocumentBuilder()
        builder.register_operation("get", "/users/:id", {"summary": "read"})
        builder.register_operation("DELETE", "/users/:id", {"summary": "remove"})
        assert builder.get_document()["paths"] == {
            "/users/{id}": {"get": {"summary": "read"}, "delete": {"summary": "remove"}},
        }

    def test_security_scheme_upsert(self):
        builder = DocumentBuilder()
        builder.register_security_scheme("jwt", {"type": "http", "scheme": "bearer"})
        builder.register_security_scheme("jwt", {"type": "http", "scheme": "basic"})
        assert builder.get_document()["components"]["securitySchemes"] == {"jwt": {"type": "http", "scheme": "basic"}}

    def test_error_schema_default_name(self):
        builder = DocumentBuilder()
        builder.register_error_schema("404", {"type": "object"}, description="Not found")
        components = builder.get_document()["components"]
        assert components["schemas"]["Error404"] == {"type": "object"}
        assert components["responses"]["Error404"] == {
            "description": "Not found",
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Error404"}}},
        }

    def test_error_schema_custom_name(self):
        builder = DocumentBuilder()
        builder.register_error_schema("500", {"type": "object"}, description="Boom", name="ServerError")
        assert "ServerError" in builder.get_document()["components"]["responses"]


class TestReset:
    def test_reset_clears_paths_and_components_but_keeps_info(self):
        builder = DocumentBuilder(OpenApiRegistryConfig(title="Kept"))
        builder.register_operation("get", "/a", {})
        builder.register_security_scheme("jwt", {"type": "http", "scheme": "bearer"})
        builder.register_error_schema("400", {"type": "object"}, description="Bad request")

        builder.reset()
        doc = builder.get_document()
        assert doc["paths"] == {}
        assert doc["components"]["schemas"] == {}
        assert doc["components"]["securitySchemes"] == {}
        assert "Error400" in doc["components"]["responses"]
        assert doc["info"]["title"] == "Kept"

    def test_get_document_is_live(self):
        builder = DocumentBuilder()
        doc = builder.get_document()
        builder.register_operation("get", "/a", {})
        assert "/a" in doc["paths"]
