"""
frontend/api_client.py

Thin HTTP client the Streamlit app uses to talk to the CRM API.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from app.config import FrontendSettings, get_frontend_settings

logger = logging.getLogger(__name__)


class CRMApiError(RuntimeError):
    """
    Raised when the API answers with a non-2xx status or cannot be reached.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CRMApiClient:
    """
    One method per endpoint. All methods return decoded JSON.
    """

    def __init__(
        self,
        settings: FrontendSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        settings = settings or get_frontend_settings()
        self._base_url = settings.api_base_url.rstrip("/")
        self._timeout_seconds = settings.timeout_seconds
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Auth & users
    # ------------------------------------------------------------------

    def login(self, email: str, password: str) -> dict[str, Any]:
        return self._request("POST", "/login", json={"email": email, "password": password})

    def list_users(self) -> list[dict[str, Any]]:
        return self._request("GET", "/users")

    def create_user(self, **payload: Any) -> dict[str, Any]:
        return self._request("POST", "/users", json=payload)

    def delete_user(self, user_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Targets & reports
    # ------------------------------------------------------------------

    def get_target(self, user_id: int) -> dict[str, Any]:
        return self._request("GET", f"/targets/{user_id}")

    def save_target(self, user_id: int, **payload: Any) -> dict[str, Any]:
        return self._request("POST", "/targets", json={"user_id": user_id, **payload})

    def list_reports(self, user_id: int) -> list[dict[str, Any]]:
        return self._request("GET", f"/reports/{user_id}")

    def monthly_summary(self, user_id: int) -> dict[str, Any]:
        return self._request("GET", f"/reports/{user_id}/summary")

    def submit_report(self, user_id: int, **payload: Any) -> dict[str, Any]:
        return self._request("POST", "/reports", json={"user_id": user_id, **payload})

    # ------------------------------------------------------------------
    # Admin & KPIs
    # ------------------------------------------------------------------

    def admin_stats(self, year: int | None = None, month: int | None = None) -> dict[str, Any]:
        params = {key: value for key, value in (("year", year), ("month", month)) if value is not None}
        return self._request("GET", "/admin/stats", params=params or None)

    def list_kpis(self) -> list[dict[str, Any]]:
        return self._request("GET", "/kpis")

    def create_kpi(self, name: str, description: str | None = None) -> dict[str, Any]:
        return self._request("POST", "/kpis", json={"name": name, "description": description})

    def deactivate_kpi(self, kpi_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/kpis/{kpi_id}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                json=json,
                params=params,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("CRM API unreachable method=%s url=%s: %s", method, url, exc)
            raise CRMApiError(f"CRM API unreachable: {exc}") from exc

        if response.status_code >= 400:
            raise CRMApiError(_error_detail(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise CRMApiError("CRM API response was not valid JSON.", response.status_code) from exc


def _error_detail(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        first = detail[0]
        if isinstance(first, dict) and "msg" in first:
            return str(first["msg"])
    return f"HTTP {response.status_code}"
