"""
tests/test_reports_api.py
"""

from __future__ import annotations

from datetime import date

import pytest

from app.config import CRMSettings
from app.services import report_service
from db.repositories.types import MAX_YEAR


class TestSubmitReport:
    def test_created_with_defaults(self, client, make_user) -> None:
        user = make_user()

        response = client.post("/api/reports", json={"user_id": user.id, "calls": 5})

        assert response.status_code == 201
        body = response.json()
        assert body["calls"] == 5
        assert body["revenue"] == 0
        assert body["date"] == date.today().isoformat()

    def test_same_day_reports_are_not_merged(self, client, make_user) -> None:
        user = make_user()
        for calls in (1, 2):
            client.post(f"/api/reports/{user.id}", json={"date": "2026-01-05", "calls": calls})

        reports = client.get(f"/api/reports/{user.id}").json()

        assert [r["calls"] for r in reports] == [1, 2]

    def test_listing_is_newest_first(self, client, make_user) -> None:
        user = make_user()
        for day in ("2026-01-03", "2026-01-09", "2026-01-01"):
            client.post(f"/api/reports/{user.id}", json={"date": day})

        dates = [r["date"] for r in client.get(f"/api/reports/{user.id}").json()]

        assert dates == ["2026-01-09", "2026-01-03", "2026-01-01"]

    def test_unknown_user_returns_404(self, client) -> None:
        response = client.post("/api/reports", json={"user_id": 999, "calls": 1})
        assert response.status_code == 404

    def test_kpi_values_are_stored_as_strings(self, client, make_user) -> None:
        user = make_user()

        response = client.post(
            f"/api/reports/{user.id}",
            json={"kpi_data": {"Library Visits": 3, "Webinar Attendance": "12"}},
        )

        assert response.status_code == 201
        assert response.json()["kpi_data"] == {"Library Visits": "3", "Webinar Attendance": "12"}

    def test_nested_kpi_values_are_rejected(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/reports/{user.id}", json={"kpi_data": {"Visits": {"n": 1}}})

        assert response.status_code == 422

    def test_unknown_kpi_names_accepted_by_default(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/reports/{user.id}", json={"kpi_data": {"Anything": "1"}})

        assert response.status_code == 201


class TestStrictKpiKeys:
    @pytest.fixture(autouse=True)
    def _strict(self, monkeypatch) -> None:
        monkeypatch.setattr(
            report_service,
            "get_crm_settings",
            lambda: CRMSettings(strict_kpi_keys=True),
        )

    def test_undefined_kpi_is_rejected(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/reports/{user.id}", json={"kpi_data": {"Unknown": "1"}})

        assert response.status_code == 400
        assert client.get(f"/api/reports/{user.id}").json() == []

    def test_active_kpi_is_accepted(self, client, make_user) -> None:
        user = make_user()
        client.post("/api/kpis", json={"name": "Library Visits"})

        response = client.post(f"/api/reports/{user.id}", json={"kpi_data": {"Library Visits": "2"}})

        assert response.status_code == 201


class TestMonthlySummary:
    def test_summary_against_target(self, client, make_user) -> None:
        user = make_user()
        client.post(
            f"/api/targets/{user.id}",
            json={"year": 2026, "month": 1, "sales_target_monthly": 1000, "call_target_monthly": 10},
        )
        client.post(f"/api/reports/{user.id}", json={"date": "2026-01-05", "revenue": 400, "calls": 4})
        client.post(f"/api/reports/{user.id}", json={"date": "2026-01-20", "revenue": 900, "calls": 1})
        client.post(f"/api/reports/{user.id}", json={"date": "2026-02-01", "revenue": 5000})

        response = client.get(f"/api/reports/{user.id}/summary", params={"year": 2026, "month": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["report_count"] == 2
        metrics = {item["metric"]: item for item in body["metrics"]}
        assert metrics["revenue"]["achieved"] == 1300
        assert metrics["revenue"]["progress"] == 100
        assert metrics["calls"]["progress"] == pytest.approx(50.0)
        # No target: achieved is divided by 1 and capped.
        assert metrics["emails"]["target"] == 0
        assert metrics["emails"]["progress"] == 0


class TestReportInputLimits:
    @pytest.mark.parametrize("value", [2**31, 2**63, -(2**31) - 1])
    def test_counter_outside_integer_column_is_rejected(self, client, make_user, value) -> None:
        user = make_user()

        response = client.post(f"/api/reports/{user.id}", json={"calls": value})

        assert response.status_code == 422
        assert client.get(f"/api/reports/{user.id}").json() == []

    def test_counter_at_column_limits_is_stored(self, client, make_user) -> None:
        user = make_user()

        response = client.post(
            f"/api/reports/{user.id}",
            json={"followups": 2**31 - 1, "leads": -(2**31)},
        )

        assert response.status_code == 201
        assert response.json()["followups"] == 2**31 - 1
        assert response.json()["leads"] == -(2**31)

    def test_oversized_user_id_in_body_is_rejected(self, client) -> None:
        response = client.post("/api/reports", json={"user_id": 2**63, "calls": 1})
        assert response.status_code == 422

    def test_summary_for_last_supported_december(self, client, make_user) -> None:
        user = make_user()

        response = client.get(f"/api/reports/{user.id}/summary", params={"year": MAX_YEAR, "month": 12})

        assert response.status_code == 200
        assert response.json()["report_count"] == 0

    def test_summary_past_last_full_month_is_rejected(self, client, make_user) -> None:
        user = make_user()

        response = client.get(f"/api/reports/{user.id}/summary", params={"year": MAX_YEAR + 1, "month": 12})

        assert response.status_code == 422


class TestKpiValueText:
    def test_scalars_are_spelled_as_json(self, client, make_user) -> None:
        user = make_user()

        response = client.post(
            f"/api/reports/{user.id}",
            json={
                "kpi_data": {
                    "Confirmed": True,
                    "Visits": 1.0,
                    "Hours": 2.5,
                    "Skipped": None,
                    "Note": "as typed",
                }
            },
        )

        assert response.status_code == 201
        assert response.json()["kpi_data"] == {
            "Confirmed": "true",
            "Visits": "1",
            "Hours": "2.5",
            "Skipped": "",
            "Note": "as typed",
        }
