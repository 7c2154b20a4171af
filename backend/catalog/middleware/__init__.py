"""
Middleware package.
"""
from catalog.core.logging import LoggerContextMiddleware
from catalog.middleware.error_handler import ErrorHandlerMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "LoggerContextMiddleware",
]
