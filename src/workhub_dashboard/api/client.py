from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT, DEFAULT_SESSION_COOKIE
from ..core.exceptions import ApiError, AuthenticationError

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON client for the upstream workhub REST API.

    Note: One `requests.Session` is shared; per-user clients are derived with
    `with_session_cookie` so the caller's upstream session is forwarded.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT,
        session: Optional[requests.Session] = None,
        session_cookie: Optional[str] = None,
        cookie_name: str = DEFAULT_SESSION_COOKIE,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        self._session_cookie = session_cookie
        self._cookie_name = cookie_name

    def with_session_cookie(self, value: Optional[str]) -> "ApiClient":
        return ApiClient(
            self._base_url,
            timeout=self._timeout,
            session=self._session,
            session_cookie=value,
            cookie_name=self._cookie_name,
        )

    def get_json(self, path: str, params: Optional[dict] = None) -> Any:
        """GET `path` and decode JSON.

        Returns None when the body is not JSON (e.g. the plain-text
        "no record today" answer of /attendance/today).
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        cookies = {self._cookie_name: self._session_cookie} if self._session_cookie else None

        try:
            res = self._session.get(url, params=params, cookies=cookies, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error(f"API request failed: GET {url} - {e}")
            raise ApiError("API 서버에 연결할 수 없습니다") from e

        if res.status_code == 401:
            logger.warning(f"API auth rejected: GET {url} - {res.status_code}")
            raise AuthenticationError(status_code=res.status_code)
        if not res.ok:
            logger.error(f"API error: GET {url} - {res.status_code} - {res.text}")
            raise ApiError(f"API 요청 실패 ({res.status_code})", status_code=res.status_code)

        content_type = res.headers.get("content-type", "")
        if "application/json" not in content_type:
            logger.debug(f"Non-JSON body from GET {url}: {res.text!r}")
            return None

        try:
            return res.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from GET {url}: {e}")
            raise ApiError("API 응답을 해석할 수 없습니다", status_code=res.status_code) from e
