from starlette.responses import JSONResponse, PlainTextResponse
from starlette.testclient import TestClient

from openapi_registry.app import create_app
from openapi_registry.routes import AuthPolicy, RegistryContext, RouteDescription


async def hello(request):
    return PlainTextResponse(f"hello {request.path_params.get('name', 'world')}")


def sync_hello(request):
    return PlainTextResponse("sync hello")


async def deny(request):
    return JSONResponse({"error": "Unauthorized"}, status_code=401)


def allow(request):
    return None


class TestRouting:
    def test_colon_params_become_path_params(self):
        client = TestClient(create_app({"GET /hello/:name": hello}))
        assert client.get("/hello/ada").text == "hello ada"

    def test_sync_handler(self):
        client = TestClient(create_app({"GET /sync": sync_hello}))
        assert client.get("/sync").text == "sync hello"

    def test_method_restricted(self):
        client = TestClient(create_app({"POST /hello": hello}))
        assert client.get("/hello").status_code == 405
        assert client.post("/hello").status_code == 200

    def test_several_methods_on_one_path(self):
        client = TestClient(create_app({"GET /x": hello, "DELETE /x": sync_hello}))
        assert client.get("/x").text == "hello world"
        assert client.delete("/x").text == "sync hello"

    def test_unknown_verb_ignored(self):
        client = TestClient(create_app({"FETCH /x": hello}))
        assert client.get("/x").status_code == 404

    def test_mount_handler_populates_router(self):
        def mount(router):
            router.add_route("/inner", hello, methods=["GET"])

        client = TestClient(create_app({"MOUNT /outer": RouteDescription(handler=mount)}))
        assert client.get("/outer/inner").text == "hello world"


class TestAuthPolicies:
    def test_required_rejects(self):
        routes = {"GET /x": RouteDescription(handler=hello, auth_handler=deny, auth_policy=AuthPolicy.REQUIRED)}
        resp = TestClient(create_app(routes)).get("/x")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized"}

    def test_required_passes_with_sync_auth(self):
        routes = {"GET /x": RouteDescription(handler=hello, auth_handler=allow, auth_policy=AuthPolicy.REQUIRED)}
        assert TestClient(create_app(routes)).get("/x").status_code == 200

    def test_optional_ignores_rejection(self):
        routes = {"GET /x": RouteDescription(handler=hello, auth_handler=deny, auth_policy=AuthPolicy.OPTIONAL)}
        assert TestClient(create_app(routes)).get("/x").status_code == 200

    def test_disabled_never_calls_auth(self):
        calls = []

        def spy(request):
            calls.append(request.url.path)
            return None

        routes = {"GET /x": RouteDescription(handler=hello, auth_handler=spy, auth_policy=AuthPolicy.DISABLED)}
        assert TestClient(create_app(routes)).get("/x").status_code == 200
        assert calls == []

    def test_camel_case_entry_enforces_auth(self):
        async def secret(request):
            return JSONResponse({"secret": 1})

        routes = {"GET /secret": {"handler": secret, "authHandler": deny, "authPolicy": "required"}}
        resp = TestClient(create_app(routes)).get("/secret")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized"}

    def test_default_policy_from_context(self):
        context = RegistryContext(app_auth_handler=deny, app_auth_policy=AuthPolicy.REQUIRED)
        client = TestClient(create_app({"GET /x": hello}, context))
        assert client.get("/x").status_code == 401
