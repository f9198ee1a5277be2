"""Exception classes for the crypto price dashboard."""

from typing import Optional


class DashboardError(Exception):
    """Base exception for all dashboard errors."""
    pass


class ApiError(DashboardError):
    """Raised when a backend call fails (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"
