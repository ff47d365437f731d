"""Integration tests for the beer endpoints via TestClient."""

BASE_URL = "/api/v1/beers"


def _create_beer(client, **overrides):
    """Helper: POST /api/v1/beers and return the response body."""
    defaults = {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": "LAGER",
    }
    defaults.update(overrides)
    response = client.post(BASE_URL, json=defaults)
    assert response.status_code == 201
    return response.json()


class TestCreateEndpoint:
    def test_create_returns_created_beer(self, client):
        data = _create_beer(client)

        assert data["id"] is not None
        assert data["name"] == "Brahma"
        assert data["brand"] == "Ambev"
        assert data["quantity"] == 10
        assert data["max"] == 50
        assert data["type"] == "LAGER"

    def test_duplicated_name_returns_400(self, client):
        _create_beer(client)
        response = client.post(
            BASE_URL,
            json={"name": "Brahma", "brand": "Ambev", "max": 50, "quantity": 10, "type": "LAGER"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Beer with name Brahma already registered in the system."

    def test_missing_brand_returns_422(self, client):
        response = client.post(BASE_URL, json={"name": "Brahma", "max": 50, "quantity": 10, "type": "LAGER"})
        assert response.status_code == 422

    def test_quantity_above_max_returns_422(self, client):
        response = client.post(
            BASE_URL,
            json={"name": "Brahma", "brand": "Ambev", "max": 5, "quantity": 10, "type": "LAGER"},
        )
        assert response.status_code == 422

    def test_unknown_type_returns_422(self, client):
        response = client.post(
            BASE_URL,
            json={"name": "Brahma", "brand": "Ambev", "max": 50, "quantity": 10, "type": "CIDER"},
        )
        assert response.status_code == 422


class TestReadEndpoints:
    def test_find_by_name(self, client):
        created = _create_beer(client)
        response = client.get(f"{BASE_URL}/Brahma")

        assert response.status_code == 200
        assert response.json() == created

    def test_find_unknown_name_returns_404(self, client):
        response = client.get(f"{BASE_URL}/Brahma")
        assert response.status_code == 404
        assert response.json()["detail"] == "Beer with name Brahma not found in the system."

    def test_list_empty(self, client):
        response = client.get(BASE_URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_beers(self, client):
        _create_beer(client)
        _create_beer(client, name="Skol", type="ALE")

        response = client.get(BASE_URL)
        assert [b["name"] for b in response.json()] == ["Brahma", "Skol"]


class TestDeleteEndpoint:
    def test_delete_returns_204(self, client):
        beer = _create_beer(client)
        response = client.delete(f"{BASE_URL}/{beer['id']}")

        assert response.status_code == 204
        assert client.get(f"{BASE_URL}/Brahma").status_code == 404

    def test_delete_unknown_id_returns_404(self, client):
        response = client.delete(f"{BASE_URL}/1")
        assert response.status_code == 404


class TestQuantityEndpoints:
    def test_increment(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/increment", json={"quantity": 10})

        assert response.status_code == 200
        assert response.json()["quantity"] == 20

    def test_increment_past_max_returns_400(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/increment", json={"quantity": 41})

        assert response.status_code == 400
        assert "exceeds the max stock capacity" in response.json()["detail"]
        assert client.get(f"{BASE_URL}/Brahma").json()["quantity"] == 10

    def test_increment_unknown_id_returns_404(self, client):
        response = client.patch(f"{BASE_URL}/1/increment", json={"quantity": 1})
        assert response.status_code == 404

    def test_decrement(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/decrement", json={"quantity": 10})

        assert response.status_code == 200
        assert response.json()["quantity"] == 0

    def test_decrement_below_zero_returns_400(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/decrement", json={"quantity": 11})

        assert response.status_code == 400
        assert "less than 0" in response.json()["detail"]

    def test_decrement_unknown_id_returns_404(self, client):
        response = client.patch(f"{BASE_URL}/1/decrement", json={"quantity": 1})
        assert response.status_code == 404

    def test_negative_amount_returns_422(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/increment", json={"quantity": -1})
        assert response.status_code == 422

    def test_missing_amount_returns_422(self, client):
        beer = _create_beer(client)
        response = client.patch(f"{BASE_URL}/{beer['id']}/decrement", json={})
        assert response.status_code == 422
