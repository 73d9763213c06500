import uuid

from products_api.models.product import Product


def test_create_returns_product_with_generated_id(client):
    r = client.post("/products", json={"description": "Green tea", "value": 4.75})

    assert r.status_code == 200
    body = r.json()
    assert uuid.UUID(body["id"]).version == 4
    assert body["description"] == "Green tea"
    assert body["value"] == 4.75
    assert body["createdAt"]
    assert body["updatedAt"]


def test_create_generates_distinct_ids(create_product):
    first = create_product("Mug")
    second = create_product("Mug")
    assert first["id"] != second["id"]


def test_create_accepts_numeric_string_value(client):
    r = client.post("/products", json={"description": "Kettle", "value": "30"})
    assert r.status_code == 200
    assert r.json()["value"] == 30


def test_create_rejects_empty_description(client):
    r = client.post("/products", json={"description": "", "value": 10})

    assert r.status_code == 400
    assert r.json()["error"].startswith("description:")


def test_create_rejects_missing_value(client):
    r = client.post("/products", json={"description": "Teapot"})

    assert r.status_code == 400
    assert r.json()["error"] == "value: Field required"


def test_create_joins_multiple_errors(client):
    r = client.post("/products", json={})

    assert r.status_code == 400
    assert r.json()["error"] == "description: Field required. value: Field required"


def test_create_rejects_non_numeric_value(client):
    r = client.post("/products", json={"description": "Teapot", "value": "cheap"})

    assert r.status_code == 400
    assert "value" in r.json()["error"]


def test_create_rejects_missing_body(client):
    r = client.post("/products")

    assert r.status_code == 400
    assert r.json()["error"]


def test_create_does_not_insert_on_validation_failure(client):
    client.post("/products", json={"description": "", "value": 1})

    listing = client.get("/products").json()
    assert listing["products"] == []


def test_create_rejects_malformed_json(client):
    r = client.post("/products", content="{bad", headers={"content-type": "application/json"})

    assert r.status_code == 400
    assert r.json() == {"error": "JSON decode error"}


def test_new_products_get_timezone_aware_timestamps():
    product = Product(description="Kettle", value=30)

    assert product.createdAt.tzinfo is not None
    assert product.updatedAt.tzinfo is not None
    assert Product.__table__.c.createdAt.type.timezone is True
    assert Product.__table__.c.updatedAt.type.timezone is True
