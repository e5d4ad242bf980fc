"""
tests/test_api_client.py

CRMApiClient against a mocked requests session.
"""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

import requests

from app.config import FrontendSettings
from frontend.api_client import CRMApiClient, CRMApiError


def _response(status_code: int, payload=None, *, json_error: bool = False) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


class TestCRMApiClient(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MagicMock()
        self.client = CRMApiClient(
            FrontendSettings(api_base_url="http://api.test/api/", timeout_seconds=3.0),
            session=self.session,
        )

    def test_login_posts_credentials(self) -> None:
        self.session.request.return_value = _response(200, {"id": 1, "name": "Admin"})

        user = self.client.login("admin@scholar.com", "admin123")

        self.assertEqual(user["id"], 1)
        self.session.request.assert_called_once_with(
            "POST",
            "http://api.test/api/login",
            json={"email": "admin@scholar.com", "password": "admin123"},
            params=None,
            timeout=3.0,
        )

    def test_admin_stats_sends_only_given_params(self) -> None:
        self.session.request.return_value = _response(200, {"year": 2026, "month": 1})

        self.client.admin_stats(year=2026, month=1)
        self.client.admin_stats()

        first, second = self.session.request.call_args_list
        self.assertEqual(first.kwargs["params"], {"year": 2026, "month": 1})
        self.assertIsNone(second.kwargs["params"])

    def test_submit_report_includes_user_id(self) -> None:
        self.session.request.return_value = _response(201, {"id": 9})

        self.client.submit_report(4, calls=3, revenue=100.0)

        call = self.session.request.call_args
        self.assertEqual(call.args, ("POST", "http://api.test/api/reports"))
        self.assertEqual(call.kwargs["json"], {"user_id": 4, "calls": 3, "revenue": 100.0})

    def test_http_error_uses_detail_string(self) -> None:
        self.session.request.return_value = _response(401, {"detail": "Invalid credentials"})

        with self.assertRaises(CRMApiError) as ctx:
            self.client.login("a@b.c", "wrong")

        self.assertEqual(str(ctx.exception), "Invalid credentials")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_validation_error_uses_first_message(self) -> None:
        self.session.request.return_value = _response(
            422, {"detail": [{"loc": ["body", "role"], "msg": "Input should be 'admin' or 'employee'"}]}
        )

        with self.assertRaises(CRMApiError) as ctx:
            self.client.create_user(name="x", email="x@y.z", password="p", role="owner")

        self.assertIn("admin", str(ctx.exception))

    def test_non_json_error_falls_back_to_status(self) -> None:
        self.session.request.return_value = _response(502, json_error=True)

        with self.assertRaises(CRMApiError) as ctx:
            self.client.list_users()

        self.assertEqual(str(ctx.exception), "HTTP 502")

    def test_connection_failure_is_wrapped(self) -> None:
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(CRMApiError) as ctx:
            self.client.list_kpis()

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("unreachable", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
