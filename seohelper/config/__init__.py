"""
SEO helper configuration - typed models and YAML loading.
"""

from .loader import build_config, load_config
from .models import (
    DEFAULT_DESCRIPTION_MAX,
    DEFAULT_SEPARATOR,
    DEFAULT_TITLE_MAX,
    ROBOTS_CONTENT,
    DescriptionConfig,
    KeywordsConfig,
    MiscConfig,
    SeoHelperConfig,
    TitleConfig,
    split_keywords,
)

__all__ = [
    # Loading
    "build_config",
    "load_config",
    # Models
    "SeoHelperConfig",
    "TitleConfig",
    "DescriptionConfig",
    "KeywordsConfig",
    "MiscConfig",
    # Helpers
    "split_keywords",
    # Constants
    "DEFAULT_SEPARATOR",
    "DEFAULT_TITLE_MAX",
    "DEFAULT_DESCRIPTION_MAX",
    "ROBOTS_CONTENT",
]
