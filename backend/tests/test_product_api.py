"""
Component tests for the product API.

Requests go through the real FastAPI routes, services, repositories and an
in-memory database. Nothing is mocked.
"""

from fastapi.testclient import TestClient


class TestCreateProduct:
    def test_created_product_appears_in_listing(self, test_client: TestClient):
        # Act
        response = test_client.post(
            "/products", json={"name": "치킨", "price": 10_000, "image": "치킨 사진"}
        )

        # Assert
        assert response.status_code == 201
        assert response.headers["location"] == "/products"
        assert response.content == b""

        products = test_client.get("/products").json()
        assert len(products) == 1
        assert products[0]["name"] == "치킨"
        assert products[0]["price"] == 10_000
        assert products[0]["image"] == "치킨 사진"

    def test_missing_fields_return_field_message_map(self, test_client: TestClient):
        # Act
        response = test_client.post("/products", json={"name": "치킨"})

        # Assert
        assert response.status_code == 400
        errors = response.json()
        assert set(errors) == {"price", "image"}
        assert all(isinstance(message, str) and message for message in errors.values())

        # Nothing reached the store
        assert test_client.get("/products").json() == []

    def test_null_field_fails_validation(self, test_client: TestClient):
        response = test_client.post(
            "/products", json={"name": None, "price": 10_000, "image": "치킨 사진"}
        )

        assert response.status_code == 400
        assert list(response.json()) == ["name"]

    def test_wrongly_typed_price_fails_validation(self, test_client: TestClient):
        response = test_client.post(
            "/products", json={"name": "치킨", "price": "비쌈", "image": "치킨 사진"}
        )

        assert response.status_code == 400
        assert "price" in response.json()

    def test_price_beyond_column_range_fails_validation(
        self, test_client: TestClient
    ):
        response = test_client.post(
            "/products", json={"name": "치킨", "price": 2**63, "image": "치킨 사진"}
        )

        assert response.status_code == 400
        assert list(response.json()) == ["price"]
        assert test_client.get("/products").json() == []

    def test_boolean_price_fails_validation(self, test_client: TestClient):
        response = test_client.post(
            "/products", json={"name": "치킨", "price": True, "image": "치킨 사진"}
        )

        assert response.status_code == 400
        assert list(response.json()) == ["price"]
        assert test_client.get("/products").json() == []

    def test_negative_price_is_stored(self, test_client: TestClient):
        response = test_client.post(
            "/products", json={"name": "치킨", "price": -1, "image": "치킨 사진"}
        )

        assert response.status_code == 201
        assert test_client.get("/products").json()[0]["price"] == -1


class TestUpdateProduct:
    def test_full_update_replaces_listing_values(
        self, test_client: TestClient, make_product
    ):
        # Arrange
        product = make_product("치킨", 10_000, "치킨 사진")

        # Act
        response = test_client.put(
            f"/products/{product['id']}",
            json={"name": "피자", "price": 1_000, "image": "피자 사진"},
        )

        # Assert
        assert response.status_code == 200
        assert response.content == b""

        products = test_client.get("/products").json()
        assert products == [
            {"id": product["id"], "name": "피자", "price": 1_000, "image": "피자 사진"}
        ]

    def test_price_only_update_keeps_name_and_image(
        self, test_client: TestClient, make_product
    ):
        product = make_product("치킨", 10_000, "치킨 사진")

        response = test_client.put(f"/products/{product['id']}", json={"price": 1_000})

        assert response.status_code == 200
        updated = test_client.get("/products").json()[0]
        assert updated == {
            "id": product["id"],
            "name": "치킨",
            "price": 1_000,
            "image": "치킨 사진",
        }

    def test_null_fields_keep_existing_values(self, test_client: TestClient, make_product):
        product = make_product("치킨", 10_000, "치킨 사진")

        response = test_client.put(
            f"/products/{product['id']}", json={"name": None, "image": "새 사진"}
        )

        assert response.status_code == 200
        updated = test_client.get("/products").json()[0]
        assert updated["name"] == "치킨"
        assert updated["price"] == 10_000
        assert updated["image"] == "새 사진"

    def test_updating_missing_product_returns_400(self, test_client: TestClient):
        response = test_client.put("/products/999", json={"price": 1_000})

        assert response.status_code == 400
        assert response.text == "찾는 상품이 없습니다."

    def test_non_numeric_id_returns_field_message(self, test_client: TestClient):
        response = test_client.put("/products/abc", json={"price": 1_000})

        assert response.status_code == 400
        assert "product_id" in response.json()

    def test_price_beyond_column_range_keeps_product(
        self, test_client: TestClient, make_product
    ):
        product = make_product("치킨", 10_000, "치킨 사진")

        response = test_client.put(
            f"/products/{product['id']}", json={"price": 2_147_483_648}
        )

        assert response.status_code == 400
        assert list(response.json()) == ["price"]
        assert test_client.get("/products").json()[0]["price"] == 10_000


class TestDeleteProduct:
    def test_deleted_product_disappears_from_listing(
        self, test_client: TestClient, make_product
    ):
        # Arrange
        product = make_product("치킨", 10_000, "치킨 사진")

        # Act
        response = test_client.delete(f"/products/{product['id']}")

        # Assert
        assert response.status_code == 200
        assert response.content == b""
        assert test_client.get("/products").json() == []

    def test_deleting_missing_product_returns_400(self, test_client: TestClient):
        response = test_client.delete("/products/999")

        assert response.status_code == 400
        assert response.text == "접근하려는 데이터가 존재하지 않습니다."

    def test_out_of_range_id_returns_field_message(self, test_client: TestClient):
        response = test_client.delete("/products/18446744073709551616")

        assert response.status_code == 400
        assert list(response.json()) == ["product_id"]

    def test_delete_only_removes_target(self, test_client: TestClient, make_product):
        chicken = make_product("치킨", 10_000, "치킨 사진")
        pizza = make_product("피자", 1_000, "피자 사진")

        test_client.delete(f"/products/{chicken['id']}")

        assert [p["id"] for p in test_client.get("/products").json()] == [pizza["id"]]


class TestProductScenario:
    """Create, update and list a product end to end."""

    def test_create_then_update_then_list(self, test_client: TestClient):
        create_response = test_client.post(
            "/products", json={"name": "치킨", "price": 10_000, "image": "치킨 사진"}
        )
        assert create_response.status_code == 201

        listing = test_client.get("/products").json()
        assert listing[0]["name"] == "치킨"
        assert listing[0]["price"] == 10_000
        assert listing[0]["image"] == "치킨 사진"

        product_id = listing[0]["id"]
        update_response = test_client.put(
            f"/products/{product_id}",
            json={"name": "피자", "price": 1_000, "image": "피자 사진"},
        )
        assert update_response.status_code == 200

        listing = test_client.get("/products").json()
        assert [(p["name"], p["price"], p["image"]) for p in listing] == [
            ("피자", 1_000, "피자 사진")
        ]
        assert all(p["name"] != "치킨" for p in listing)
