"""
Core building blocks shared by the SEO entities.

Pure helpers only: no I/O, no configuration loading.
"""

from .errors import ConfigError, InvalidArgumentError, SeoHelperError
from .html import MetaTag, limit_text, render_link_tag, render_meta_tag, render_title_tag
from .ports import Renderable

__all__ = [
    # Errors
    "SeoHelperError",
    "InvalidArgumentError",
    "ConfigError",
    # HTML helpers
    "MetaTag",
    "limit_text",
    "render_link_tag",
    "render_meta_tag",
    "render_title_tag",
    # Ports
    "Renderable",
]
