class DomainError(Exception):
    """Base exception for dashboard errors."""


class ValidationError(DomainError):
    """Raised when caller input (query parameters, dates) is invalid."""


class ApiError(DomainError):
    """Raised when the upstream REST API fails or answers with an error."""

    def __init__(self, message: str, *, status_code: int = 0):
        super().__init__(message)
        self.status_code = int(status_code)


class AuthenticationError(ApiError):
    """Raised when the upstream session is missing or expired."""

    def __init__(self, message: str = "로그인이 필요합니다", *, status_code: int = 401):
        super().__init__(message, status_code=status_code)
