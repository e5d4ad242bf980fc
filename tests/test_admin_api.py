"""
tests/test_admin_api.py

Admin dashboard statistics and KPI definitions over HTTP.
"""

from __future__ import annotations

from datetime import date

import pytest

from db.repositories.types import MAX_YEAR, ReportingPeriod


class TestAdminStats:
    def test_january_2026_example(self, client, make_user) -> None:
        user = make_user("Test", email="t@x.com", designation=None)
        client.post(
            f"/api/targets/{user.id}",
            json={"year": 2026, "month": 1, "sales_target_monthly": 1000},
        )
        client.post(f"/api/reports/{user.id}", json={"date": "2026-01-05", "revenue": 500})

        response = client.get("/api/admin/stats", params={"year": 2026, "month": 1})

        assert response.status_code == 200
        body = response.json()
        assert (body["year"], body["month"]) == (2026, 1)
        assert body["teamStats"]["total_revenue"] == 500
        assert body["teamTargets"]["total_sales_target"] == 1000
        (row,) = body["individualPerformance"]
        assert row["name"] == "Test"
        assert row["achieved_revenue"] == 500
        assert row["target_revenue"] == 1000

    def test_defaults_to_current_month(self, client, make_user) -> None:
        user = make_user()
        client.post(f"/api/reports/{user.id}", json={"revenue": 250})

        body = client.get("/api/admin/stats").json()

        current = ReportingPeriod.containing(date.today())
        assert (body["year"], body["month"]) == (current.year, current.month)
        assert body["teamStats"]["total_revenue"] == 250

    def test_empty_database(self, client) -> None:
        body = client.get("/api/admin/stats").json()

        assert body["teamStats"]["total_calls"] == 0
        assert body["teamTargets"]["total_sales_target"] == 0
        assert body["individualPerformance"] == []

    def test_year_without_month_is_rejected(self, client) -> None:
        assert client.get("/api/admin/stats", params={"year": 2026}).status_code == 400

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range_is_rejected(self, client, month) -> None:
        response = client.get("/api/admin/stats", params={"year": 2026, "month": month})
        assert response.status_code == 422

    def test_year_past_last_full_month_is_rejected(self, client) -> None:
        response = client.get("/api/admin/stats", params={"year": MAX_YEAR + 1, "month": 12})
        assert response.status_code == 422

    def test_last_supported_december_is_served(self, client) -> None:
        response = client.get("/api/admin/stats", params={"year": MAX_YEAR, "month": 12})

        assert response.status_code == 200
        assert response.json()["teamStats"]["total_revenue"] == 0


class TestKpisApi:
    def test_create_list_deactivate(self, client) -> None:
        created = client.post("/api/kpis", json={"name": "Library Visits", "description": "Visits"})
        client.post("/api/kpis", json={"name": "Webinars"})

        assert created.status_code == 201
        kpi = created.json()
        assert kpi["is_active"] is True

        deactivated = client.delete(f"/api/kpis/{kpi['id']}")

        assert deactivated.status_code == 200
        assert deactivated.json()["is_active"] is False
        assert [item["name"] for item in client.get("/api/kpis").json()] == ["Webinars"]

    def test_deactivate_unknown_kpi_returns_404(self, client) -> None:
        assert client.delete("/api/kpis/42").status_code == 404

    def test_blank_name_is_rejected(self, client) -> None:
        assert client.post("/api/kpis", json={"name": ""}).status_code == 422
