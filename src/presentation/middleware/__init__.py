"""
Middleware layer for Timeline application.

This package contains middleware components for request processing,
such as correlation IDs.
"""

from src.presentation.middleware.correlation import CorrelationIDMiddleware

__all__ = ["CorrelationIDMiddleware"]
