"""
Error types raised by the SEO helper.
"""

from __future__ import annotations


class SeoHelperError(Exception):
    """Base class for SEO helper errors."""


class InvalidArgumentError(SeoHelperError, ValueError):
    """Raised when an entity setter receives a value of the wrong shape."""


class ConfigError(SeoHelperError, ValueError):
    """Raised when SEO configuration fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"SEO config validation failed: {'; '.join(errors)}")
