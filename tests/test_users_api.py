"""
tests/test_users_api.py

Login and user management over HTTP.
"""

from __future__ import annotations

from datetime import date

from db.repositories.report_repository import ReportRepository
from db.repositories.target_repository import TargetRepository
from db.repositories.types import ReportInput, TargetValues


class TestLogin:
    def test_valid_credentials_return_user_without_password(self, client, make_user) -> None:
        user = make_user("Priya", email="priya@scholar.test", password="emp123")

        response = client.post("/api/login", json={"email": "priya@scholar.test", "password": "emp123"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == user.id
        assert body["role"] == "employee"
        assert "password" not in body

    def test_wrong_password_and_unknown_email_look_identical(self, client, make_user) -> None:
        make_user(email="priya@scholar.test", password="emp123")

        wrong_password = client.post("/api/login", json={"email": "priya@scholar.test", "password": "nope"})
        unknown_email = client.post("/api/login", json={"email": "ghost@scholar.test", "password": "emp123"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid credentials"}

    def test_password_comparison_is_exact(self, client, make_user) -> None:
        make_user(email="priya@scholar.test", password="emp123")

        response = client.post("/api/login", json={"email": "priya@scholar.test", "password": "EMP123"})

        assert response.status_code == 401


class TestUsers:
    def test_create_and_list(self, client) -> None:
        response = client.post(
            "/api/users",
            json={
                "name": "Rajesh",
                "email": "rajesh@scholar.test",
                "password": "emp123",
                "designation": "Sales Executive",
            },
        )

        assert response.status_code == 201
        created = response.json()
        assert created["role"] == "employee"
        assert "password" not in created

        listed = client.get("/api/users").json()
        assert [user["email"] for user in listed] == ["rajesh@scholar.test"]

    def test_duplicate_email_is_rejected(self, client, make_user) -> None:
        make_user(email="taken@scholar.test")

        response = client.post(
            "/api/users",
            json={"name": "Other", "email": "taken@scholar.test", "password": "x"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already exists"
        assert len(client.get("/api/users").json()) == 1

    def test_unknown_role_is_rejected(self, client) -> None:
        response = client.post(
            "/api/users",
            json={"name": "X", "email": "x@scholar.test", "password": "x", "role": "owner"},
        )

        assert response.status_code == 422

    def test_delete_unknown_user_returns_404(self, client) -> None:
        assert client.delete("/api/users/999").status_code == 404

    def test_delete_leaves_targets_and_reports_behind(self, client, db_session, make_user) -> None:
        user = make_user()
        TargetRepository(db_session).upsert_target(
            user_id=user.id, year=2026, month=1, values=TargetValues(sales_target_monthly=500)
        )
        ReportRepository(db_session).create_report(ReportInput(user_id=user.id, date=date(2026, 1, 4), calls=2))
        db_session.commit()

        response = client.delete(f"/api/users/{user.id}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/users").json() == []
        assert len(client.get(f"/api/reports/{user.id}").json()) == 1
        assert client.get(f"/api/targets/{user.id}").json()["sales_target_monthly"] == 500


class TestHealth:
    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
