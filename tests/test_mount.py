import pytest
from pydantic import BaseModel
from starlette.responses import JSONResponse
from starlette.testclient import TestClient

from openapi_registry.app import create_app
from openapi_registry.config import OpenApiRegistryConfig, SwaggerUiOptions
from openapi_registry.contract import ContractRegistry
from openapi_registry.registry import OpenApiRegistry
from openapi_registry.security import SecuritySchemeTable


class Pong(BaseModel):
    pong: bool


@pytest.fixture
def contracts():
    return ContractRegistry()


@pytest.fixture
def routes(contracts):
    @contracts.with_contract({"operationId": "ping", "response": {"content": {200: Pong}}})
    async def ping(request):
        return JSONResponse({"pong": True})

    return {"GET /ping": ping}


def _client(contracts, routes, **config) -> tuple[TestClient, OpenApiRegistry]:
    registry = OpenApiRegistry(OpenApiRegistryConfig(title="Ping API", **config), contracts, SecuritySchemeTable())
    return TestClient(create_app(registry.register_routes(routes))), registry


class TestEmbeddedDocument:
    def test_docs_page_embeds_document(self, contracts, routes):
        client, _ = _client(contracts, routes)
        resp = client.get("/api/docs/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "swagger-ui" in resp.text
        assert '"spec"' in resp.text
        assert '"operationId": "ping"' in resp.text
        assert "<title>Ping API</title>" in resp.text

    def test_mount_path_without_slash_redirects(self, contracts, routes):
        client, _ = _client(contracts, routes)
        resp = client.get("/api/docs")
        assert resp.status_code == 200
        assert "swagger-ui" in resp.text

    def test_no_json_endpoint_by_default(self, contracts, routes):
        client, _ = _client(contracts, routes)
        assert client.get("/api/docs/swagger.json").status_code == 404

    def test_routes_still_served(self, contracts, routes):
        client, _ = _client(contracts, routes)
        assert client.get("/ping").json() == {"pong": True}


class TestJsonEndpoint:
    def test_raw_document_served(self, contracts, routes):
        client, registry = _client(contracts, routes, swagger_json_path="/swagger.json")
        resp = client.get("/api/docs/swagger.json")
        assert resp.status_code == 200
        assert resp.json() == registry.get_openapi_schema()

    def test_ui_fetches_relative_url(self, contracts, routes):
        client, _ = _client(contracts, routes, swagger_json_path="/swagger.json")
        html = client.get("/api/docs/").text
        assert "url: 'swagger.json'" in html
        assert '"spec"' not in html

    def test_document_is_live(self, contracts, routes):
        client, registry = _client(contracts, routes, swagger_json_path="openapi.json")
        registry.reset()
        assert client.get("/api/docs/openapi.json").json()["paths"] == {}


class TestUiOptions:
    def test_custom_path_and_title(self, contracts, routes):
        client, _ = _client(contracts, routes, path="/docs", swagger_ui=SwaggerUiOptions(title="Explorer"))
        resp = client.get("/docs/")
        assert resp.status_code == 200
        assert "<title>Explorer</title>" in resp.text

    def test_parameters_passed_through(self, contracts, routes):
        options = SwaggerUiOptions(swagger_ui_parameters={"deepLinking": False, "filter": True})
        client, _ = _client(contracts, routes, swagger_ui=options)
        html = client.get("/api/docs/").text
        assert '"deepLinking": false' in html
        assert '"filter": true' in html

    def test_script_close_in_document_is_escaped(self, contracts):
        @contracts.with_contract({"description": "Breaks out </script><b>x</b>", "response": {"content": {200: Pong}}})
        async def tricky(request):
            return JSONResponse({"pong": True})

        client, _ = _client(contracts, {"GET /tricky": tricky})
        html = client.get("/api/docs/").text
        assert "Breaks out <\\/script><b>x<\\/b>" in html
        assert html.count("</script>") == 2
