from __future__ import annotations

import pytest
import requests

from workhub_dashboard.api.client import ApiClient
from workhub_dashboard.core.exceptions import ApiError, AuthenticationError


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text="", content_type="application/json"):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        self.headers = {"content-type": content_type} if content_type else {}

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("no json")
        return self._json


class FakeSession:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, params=None, cookies=None, timeout=None):
        self.calls.append({"url": url, "params": params, "cookies": cookies, "timeout": timeout})
        if self._error:
            raise self._error
        return self._response


def test_get_json_builds_url_and_forwards_cookie():
    session = FakeSession(FakeResponse(json_data=[{"workDate": "2024-05-01"}]))
    client = ApiClient("http://api.test/api/", timeout=3, session=session).with_session_cookie("abc")

    data = client.get_json("/attendance/me/month", params={"year": 2024, "month": 5})

    assert data == [{"workDate": "2024-05-01"}]
    assert session.calls == [
        {
            "url": "http://api.test/api/attendance/me/month",
            "params": {"year": 2024, "month": 5},
            "cookies": {"JSESSIONID": "abc"},
            "timeout": 3.0,
        }
    ]


def test_get_json_returns_none_for_plain_text():
    session = FakeSession(FakeResponse(text="오늘 근태 기록이 없습니다.", content_type="text/plain;charset=UTF-8"))
    assert ApiClient("http://api.test", session=session).get_json("/attendance/today") is None


def test_unauthorized_raises_authentication_error():
    session = FakeSession(FakeResponse(status_code=401, text="Unauthorized"))
    with pytest.raises(AuthenticationError):
        ApiClient("http://api.test", session=session).get_json("/userinfo/me")


def test_server_error_hides_upstream_body():
    session = FakeSession(FakeResponse(status_code=500, text="<html>Whitelabel Error Page</html>"))
    with pytest.raises(ApiError) as exc:
        ApiClient("http://api.test", session=session).get_json("/attendance/today")

    assert exc.value.status_code == 500
    assert str(exc.value) == "API 요청 실패 (500)"
    assert "Whitelabel" not in str(exc.value)


def test_forbidden_is_an_api_error_not_a_login_error():
    session = FakeSession(FakeResponse(status_code=403, text="Forbidden"))
    with pytest.raises(ApiError) as exc:
        ApiClient("http://api.test", session=session).get_json("/attendance/me/month")

    assert not isinstance(exc.value, AuthenticationError)
    assert exc.value.status_code == 403


def test_transport_error_is_wrapped():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as exc:
        ApiClient("http://api.test", session=session).get_json("/attendance/today")
    assert exc.value.status_code == 0
