"""
tests/test_targets_api.py
"""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from db.models.target import Target
from db.repositories.types import MAX_YEAR


def _target_body(**overrides):
    body = {
        "year": 2026,
        "month": 1,
        "sales_target_yearly": 1_200_000,
        "sales_target_monthly": 100_000,
        "call_target_monthly": 300,
        "email_target_monthly": 200,
        "whatsapp_target_monthly": 100,
        "social_target_monthly": 50,
    }
    body.update(overrides)
    return body


class TestTargetsApi:
    def test_no_target_returns_empty_object(self, client, make_user) -> None:
        user = make_user()

        response = client.get(f"/api/targets/{user.id}")

        assert response.status_code == 200
        assert response.json() == {}

    def test_upsert_twice_keeps_one_row(self, client, db_session, make_user) -> None:
        user = make_user()

        first = client.post("/api/targets", json={"user_id": user.id, **_target_body()})
        second = client.post(
            "/api/targets",
            json={"user_id": user.id, **_target_body(sales_target_monthly=150_000)},
        )

        assert first.status_code == second.status_code == 200
        assert first.json()["id"] == second.json()["id"]
        assert db_session.scalar(select(func.count()).select_from(Target)) == 1
        assert client.get(f"/api/targets/{user.id}").json()["sales_target_monthly"] == 150_000

    def test_path_variant_and_omitted_figures_default_to_zero(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/targets/{user.id}", json={"year": 2026, "month": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == user.id
        assert body["sales_target_monthly"] == 0
        assert body["social_target_monthly"] == 0

    def test_latest_target_wins_and_period_can_be_selected(self, client, make_user) -> None:
        user = make_user()
        client.post(f"/api/targets/{user.id}", json=_target_body(year=2025, month=12, sales_target_monthly=1))
        client.post(f"/api/targets/{user.id}", json=_target_body(year=2026, month=1, sales_target_monthly=2))

        latest = client.get(f"/api/targets/{user.id}").json()
        december = client.get(f"/api/targets/{user.id}", params={"year": 2025, "month": 12}).json()
        march = client.get(f"/api/targets/{user.id}", params={"year": 2026, "month": 3}).json()

        assert (latest["year"], latest["month"]) == (2026, 1)
        assert december["sales_target_monthly"] == 1
        assert march == {}

    def test_unknown_user_returns_404(self, client) -> None:
        response = client.post("/api/targets", json={"user_id": 999, **_target_body()})
        assert response.status_code == 404

    def test_invalid_month_is_rejected(self, client, make_user) -> None:
        user = make_user()
        response = client.post(f"/api/targets/{user.id}", json=_target_body(month=13))
        assert response.status_code == 422

    @pytest.mark.parametrize("value", [2**31, 2**63])
    def test_quota_outside_integer_column_is_rejected(self, client, make_user, value) -> None:
        user = make_user()

        response = client.post(f"/api/targets/{user.id}", json=_target_body(call_target_monthly=value))

        assert response.status_code == 422
        assert client.get(f"/api/targets/{user.id}").json() == {}

    def test_negative_quota_is_still_accepted(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/targets/{user.id}", json=_target_body(email_target_monthly=-5))

        assert response.status_code == 200
        assert response.json()["email_target_monthly"] == -5

    def test_year_past_last_full_month_is_rejected(self, client, make_user) -> None:
        user = make_user()

        response = client.post(f"/api/targets/{user.id}", json=_target_body(year=MAX_YEAR + 1, month=12))

        assert response.status_code == 422
