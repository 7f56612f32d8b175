"""
Exceptions raised around the renderers.

Renderers themselves never raise; these cover loading diagnostics and
writing reports.
"""

from typing import Any, Optional

from loguru import logger


class RendererException(Exception):
    """Base exception for message renderer errors."""

    def __init__(
        self, message: str, *, error_code: Optional[str] = None, **kwargs: Any
    ):
        super().__init__(message)
        self.error_code = error_code
        self.context = kwargs

        logger.bind(error_code=error_code, context=kwargs).error(
            f"RendererException: {message}"
        )


class DiagnosticsLoadError(RendererException):
    """Exception raised when a diagnostics file cannot be read or validated."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs: Any):
        super().__init__(message, error_code="DIAGNOSTICS_LOAD", path=path, **kwargs)
        self.path = path
