# File: tests/test_products_api.py

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

WIDGET = {"name": "Widget", "description": "A small widget", "price": 9.99, "stock": 3}


def test_products_require_token():
    resp = client.post("/api/products/", json=WIDGET)
    assert resp.status_code == 401
    assert resp.json() == {"message": "No token provided"}


def test_product_crud(auth_headers):
    resp = client.post("/api/products/", json=WIDGET, headers=auth_headers)
    assert resp.status_code == 201
    product = resp.json()
    assert product["name"] == "Widget"
    assert product["price"] == 9.99

    resp = client.get("/api/products/", headers=auth_headers)
    assert [p["id"] for p in resp.json()] == [product["id"]]

    resp = client.put(f"/api/products/{product['id']}", json={"stock": 10}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["stock"] == 10
    assert resp.json()["name"] == "Widget"

    resp = client.delete(f"/api/products/{product['id']}", headers=auth_headers)
    assert resp.status_code == 204

    resp = client.get(f"/api/products/{product['id']}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


def test_stock_defaults_to_zero(auth_headers):
    resp = client.post("/api/products/", json={"name": "Gadget", "price": 1}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["stock"] == 0
    assert resp.json()["description"] is None


def test_negative_price_is_rejected(auth_headers):
    resp = client.post("/api/products/", json={"name": "Broken", "price": -1}, headers=auth_headers)
    assert resp.status_code == 422


def test_update_missing_product_is_404(auth_headers):
    resp = client.put("/api/products/42", json={"stock": 1}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


def test_null_clears_description_but_not_other_fields(auth_headers):
    product_id = client.post("/api/products/", json=WIDGET, headers=auth_headers).json()["id"]

    resp = client.put(f"/api/products/{product_id}", json={"description": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["description"] is None

    resp = client.put(
        f"/api/products/{product_id}",
        json={"name": None, "price": None, "stock": None},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Widget"
    assert body["price"] == 9.99
    assert body["stock"] == 3
