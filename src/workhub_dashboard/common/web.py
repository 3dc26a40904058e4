from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import ApiError, AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def session_required(container):
    """Resolve the caller's upstream session cookie and pass request-bound services.

    Domain errors are translated into JSON responses.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            cookie = request.cookies.get(container.session_cookie_name)
            if not cookie:
                return error_response("로그인이 필요합니다", 401)

            services = container.for_session(cookie)
            try:
                return view(services, *args, **kwargs)
            except ValidationError as e:
                return error_response(str(e), 400)
            except AuthenticationError as e:
                return error_response(str(e), 401)
            except ApiError as e:
                logger.error(f"Upstream API failure on {request.path}: {e} ({e.status_code})")
                return error_response(str(e), 502)

        return wrapper

    return decorator
