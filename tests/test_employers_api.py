"""
Testes da API de empregadores e do health check
"""


class TestEmployersAPI:
    def test_get_employers_empty(self, client):
        response = client.get("/employers")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_employers_after_batch_insert(self, client, store, four_employers):
        """Quatro empregadores num lote: query_all devolve os 4 e a API também"""
        store.insert_rows(four_employers)
        assert store.query_all() == four_employers

        response = client.get("/employers")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 4
        assert [d["name"] for d in data] == ["Salesforce", "Sonos", "Fedex", "First Solar"]
        assert data[2] == {
            "id": four_employers[2].id,
            "name": "Fedex",
            "sector": "Transportation/E-Commerce",
            "summary": four_employers[2].summary,
        }

    def test_get_employers_store_unreachable(self, client, unreachable_db):
        response = client.get("/employers")

        assert response.status_code == 503
        assert "detail" in response.json()


class TestHealth:
    def test_health_ok(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"] == "connected"

    def test_health_store_unreachable(self, client, unreachable_db):
        response = client.get("/api/v1/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
