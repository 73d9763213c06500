from products_api.dao.product_dao import prefix_pattern
from products_api.services.product_service import MAX_PAGE


def seed(create_product, count, prefix="Product"):
    return [create_product(f"{prefix} {i}", i) for i in range(count)]


class TestListPagination:
    def test_empty_table(self, client):
        r = client.get("/products", params={"page": 1})

        assert r.status_code == 200
        assert r.json() == {"products": [], "next": None, "previous": False}

    def test_page_defaults_to_first(self, client, create_product):
        seed(create_product, 3)

        body = client.get("/products").json()
        assert len(body["products"]) == 3
        assert body["next"] is None
        assert body["previous"] is False

    def test_first_page_of_25(self, client, create_product):
        seed(create_product, 25)

        body = client.get("/products", params={"page": 1}).json()
        assert len(body["products"]) == 20
        assert body["previous"] is False
        assert body["next"] == "http://testserver/products?page=2"

    def test_second_page_of_25(self, client, create_product):
        seed(create_product, 25)

        body = client.get("/products", params={"page": 2}).json()
        assert len(body["products"]) == 5
        assert body["previous"] is True
        assert body["next"] is None

    def test_exactly_one_full_page_has_no_next(self, client, create_product):
        seed(create_product, 20)

        body = client.get("/products").json()
        assert len(body["products"]) == 20
        assert body["next"] is None

    def test_page_past_the_end(self, client, create_product):
        seed(create_product, 3)

        body = client.get("/products", params={"page": 5}).json()
        assert body == {"products": [], "next": None, "previous": True}

    def test_newest_first(self, client, create_product):
        created = seed(create_product, 3)

        body = client.get("/products").json()
        assert [p["id"] for p in body["products"]] == [p["id"] for p in reversed(created)]

    def test_pages_do_not_overlap(self, client, create_product):
        seed(create_product, 25)

        first = client.get("/products", params={"page": 1}).json()["products"]
        second = client.get("/products", params={"page": 2}).json()["products"]
        assert not {p["id"] for p in first} & {p["id"] for p in second}
        assert second[-1]["description"] == "Product 0"

    def test_invalid_page_is_rejected(self, client):
        assert client.get("/products", params={"page": 0}).status_code == 400
        r = client.get("/products", params={"page": "two"})
        assert r.status_code == 400
        assert r.json()["error"].startswith("page:")


class TestListFilter:
    def test_prefix_match_is_case_insensitive(self, client, create_product):
        create_product("foobar")
        create_product("FOO fighters")
        create_product("xfoo")
        create_product("bar")

        body = client.get("/products", params={"q": "Foo"}).json()
        descriptions = sorted(p["description"] for p in body["products"])
        assert descriptions == ["FOO fighters", "foobar"]

    def test_no_match(self, client, create_product):
        create_product("bar")

        body = client.get("/products", params={"q": "zzz"}).json()
        assert body == {"products": [], "next": None, "previous": False}

    def test_no_match_on_empty_table(self, client):
        body = client.get("/products", params={"q": "zzz", "page": 2}).json()
        assert body == {"products": [], "next": None, "previous": True}

    def test_empty_query_means_no_filter(self, client, create_product):
        seed(create_product, 2)

        body = client.get("/products", params={"q": ""}).json()
        assert len(body["products"]) == 2

    def test_wildcards_match_literally(self, client, create_product):
        create_product("50% off")
        create_product("500 grams")

        body = client.get("/products", params={"q": "50%"}).json()
        assert [p["description"] for p in body["products"]] == ["50% off"]

    def test_next_link_keeps_filter(self, client, create_product):
        create_product("Unrelated")
        seed(create_product, 21, prefix="Tea")

        body = client.get("/products", params={"q": "tea"}).json()
        assert len(body["products"]) == 20
        assert body["next"] == "http://testserver/products?page=2&q=tea"


def test_prefix_pattern_escapes_wildcards():
    assert prefix_pattern("abc") == "abc%"
    assert prefix_pattern("5%_") == "5\\%\\_%"
    assert prefix_pattern("a\\b") == "a\\\\b%"


class TestListBounds:
    def test_oldest_lookup_ignores_filter(self, client, create_product):
        create_product("Unrelated")
        seed(create_product, 21, prefix="Tea")

        body = client.get("/products", params={"q": "tea", "page": 2}).json()
        assert [p["description"] for p in body["products"]] == ["Tea 0"]
        assert body["previous"] is True
        assert body["next"] == "http://testserver/products?page=3&q=tea"

    def test_page_too_large_for_offset_is_rejected(self, client):
        r = client.get("/products", params={"page": 10**19})

        assert r.status_code == 400
        assert r.json()["error"].startswith("page:")

    def test_largest_page_is_accepted(self, client, create_product):
        create_product()

        r = client.get("/products", params={"page": MAX_PAGE})
        assert r.status_code == 200
        assert r.json() == {"products": [], "next": None, "previous": True}
