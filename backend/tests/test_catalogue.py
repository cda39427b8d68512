from fastapi.testclient import TestClient

from app.db import SessionLocal, init_db
from app.main import app
from app.repositories.product_repo import ProductRepository

client = TestClient(app)


def setup_module(module):
    # Recreate DB fresh
    init_db(reset=True)

    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        repo.insert({"name": "Test Coffee", "slug": "test-coffee", "description": "Freshly roasted test beans.",
                     "price": 4.99, "category": "Accessories", "inventory": 10})
        repo.insert({"name": "Wireless Mouse", "slug": "wireless-mouse", "description": "Ergonomic wireless mouse with precision tracking.",
                     "price": 34.99, "category": "Peripherals", "inventory": 5})
        repo.insert({"name": "HDMI Cable", "slug": "hdmi-cable", "description": "High-speed cable for 4K video.",
                     "price": 19.99, "category": "Cables", "inventory": 0})
        db.commit()
    finally:
        db.close()


def test_list_products():
    res = client.get("/api/products")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert isinstance(body["data"], list)
    assert body["count"] == len(body["data"]) == 3
    slugs = [it["slug"] for it in body["data"]]
    assert "test-coffee" in slugs


def test_list_products_newest_first():
    body = client.get("/api/products").json()
    created = [it["createdAt"] for it in body["data"]]
    assert created == sorted(created, reverse=True)


def test_list_products_serializes_camel_case_fields():
    item = client.get("/api/products").json()["data"][0]
    assert set(item) == {
        "id", "name", "slug", "description", "price",
        "category", "inventory", "lastUpdated", "createdAt",
    }


def test_list_products_search_matches_name_and_description():
    body = client.get("/api/products", params={"q": "ERGONOMIC"}).json()
    assert [it["slug"] for it in body["data"]] == ["wireless-mouse"]

    body = client.get("/api/products", params={"q": "coffee"}).json()
    assert [it["slug"] for it in body["data"]] == ["test-coffee"]


def test_list_products_category_filter():
    body = client.get("/api/products", params={"category": "Cables"}).json()
    assert body["count"] == 1
    assert body["data"][0]["slug"] == "hdmi-cable"


def test_get_product_by_slug():
    res = client.get("/api/products/wireless-mouse")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Wireless Mouse"
    assert body["data"]["inventory"] == 5


def test_get_product_unknown_slug():
    res = client.get("/api/products/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Product not found"}


def test_get_product_blank_slug():
    res = client.get("/api/products/%20")
    assert res.status_code == 400
    assert res.json()["error"] == "Slug is required"


def test_list_products_store_failure(monkeypatch):
    from sqlalchemy.exc import OperationalError

    def boom(self, q=None, category=None):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(ProductRepository, "find_all", boom)
    res = client.get("/api/products")
    assert res.status_code == 500
    body = res.json()
    assert body == {"success": False, "error": "Failed to fetch products"}
    assert "locked" not in res.text
