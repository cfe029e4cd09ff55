from __future__ import annotations


def test_api_docs_redirect(client):
    for path in ("/api-docs", "/api/docs"):
        rv = client.get(path)
        assert rv.status_code == 302
        assert rv.headers["Location"].endswith("/apidocs")


def test_swagger_ui_served(client):
    rv = client.get("/apidocs/")
    assert rv.status_code == 200


def test_openapi_spec_lists_material_routes(client):
    rv = client.get("/apispec_1.json")
    assert rv.status_code == 200
    spec = rv.get_json()
    assert spec["info"]["title"] == "API de Materiais"
    assert "/api/materiais" in spec["paths"]
    assert "post" in spec["paths"]["/api/materiais"]


def test_health_reports_material_count(client, make_payload):
    client.post("/api/materiais", json=make_payload())
    rv = client.get("/api/health")
    assert rv.status_code == 200
    body = rv.get_json()
    assert body["status"] == "healthy"
    assert body["materials"] == 1
