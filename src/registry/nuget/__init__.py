"""NuGet gallery package.

This package provides NuGet gallery management support:
- visibility.py: hide (unlist) and show (list) package versions via the V2 API

Public API is exposed at registry.nuget.
"""

# Patch point exposed for tests (e.g., monkeypatch in tests)
from common.http_client import RequestsTransport  # noqa: F401

# Public API re-exports
from .visibility import (  # noqa: F401
    ValidationError,
    VisibilityRequest,
    VisibilityResult,
    build_package_url,
    hide,
    resolve_action,
    set_visibility,
    set_visibility_request,
    show,
)

__all__ = [
    # Types
    "ValidationError",
    "VisibilityRequest",
    "VisibilityResult",
    # Operations
    "build_package_url",
    "hide",
    "resolve_action",
    "set_visibility",
    "set_visibility_request",
    "show",
    # Patch point for tests
    "RequestsTransport",
]
