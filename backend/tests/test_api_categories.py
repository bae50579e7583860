"""Tests for categories API endpoints."""

import pytest


class TestCategoriesAPI:
    """Test categories CRUD endpoints."""

    def test_list_categories(self, client, sample_category):
        """Should return categories."""
        response = client.get("/api/v1/categories")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Food"

    def test_create_category(self, client):
        """Should create a new category."""
        response = client.post("/api/v1/categories", json={
            "name": "  Travel ",
            "budget": "250.00"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Travel"
        assert float(data["budget"]) == 250.0
        assert data["active"] is True

    def test_create_category_without_budget_is_unlimited(self, client):
        response = client.post("/api/v1/categories", json={"name": "Gifts"})
        assert response.status_code == 201
        assert response.json()["budget"] is None

    def test_duplicate_name_rejected_case_insensitively(self, client, sample_category):
        response = client.post("/api/v1/categories", json={"name": "FOOD"})
        assert response.status_code == 409

    def test_negative_budget_rejected(self, client):
        response = client.post("/api/v1/categories", json={"name": "Bad", "budget": -1})
        assert response.status_code == 422

    def test_update_budget_and_clear(self, client, sample_category):
        response = client.patch(f"/api/v1/categories/{sample_category.id}", json={"budget": 0})
        assert response.status_code == 200
        assert float(response.json()["budget"]) == 0.0

        response = client.patch(f"/api/v1/categories/{sample_category.id}", json={"budget": None})
        assert response.status_code == 200
        assert response.json()["budget"] is None

    def test_rename_to_existing_name_rejected(self, client, sample_category):
        other = client.post("/api/v1/categories", json={"name": "Rent"}).json()
        response = client.patch(f"/api/v1/categories/{other['id']}", json={"name": "food"})
        assert response.status_code == 409

    def test_list_active_only(self, client, sample_category):
        client.patch(f"/api/v1/categories/{sample_category.id}", json={"active": False})
        response = client.get("/api/v1/categories", params={"include_inactive": False})
        assert response.json()["total"] == 0

    def test_get_missing(self, client):
        assert client.get("/api/v1/categories/missing").status_code == 404

    def test_delete_unused_category(self, client, sample_category):
        response = client.delete(f"/api/v1/categories/{sample_category.id}")
        assert response.status_code == 204
        assert client.get(f"/api/v1/categories/{sample_category.id}").status_code == 404

    def test_delete_category_in_use_rejected(self, client, sample_expense, sample_category):
        response = client.delete(f"/api/v1/categories/{sample_category.id}")
        assert response.status_code == 409
        assert "1 expense(s)" in response.json()["detail"]
