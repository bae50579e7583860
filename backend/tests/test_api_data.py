"""Tests for CSV and reset endpoints."""


class TestDataAPI:

    def test_export_csv(self, client, sample_expense):
        response = client.get("/api/v1/data/export/csv")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment; filename=expenses.csv" in response.headers["content-disposition"]
        assert "Weekly groceries" in response.text

    def test_import_csv(self, client, sample_category):
        response = client.post("/api/v1/data/import/csv", json={
            "csv_content": "Date,Amount,Category,Payment Method,Description\n"
                           "2024-01-15,12.50,Food,Card,Lunch\n"
                           "2024-01-16,5,Unknown,Card,Snack\n"
        })
        assert response.status_code == 200
        data = response.json()
        assert data["imported"] == 1
        assert len(data["errors"]) == 1
        assert data["message"].startswith("Imported 1 expense(s). Errors: Row 3")

    def test_reset(self, client, sample_expense, sample_template):
        response = client.post("/api/v1/data/reset")
        assert response.status_code == 200
        assert response.json() == {
            "expenses_deleted": 1,
            "categories_deleted": 2,
            "recurring_deleted": 1,
        }
        assert client.get("/api/v1/categories").json()["total"] == 0
