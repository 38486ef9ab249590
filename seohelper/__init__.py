"""
SEO helper - renders <title>, description, keywords and misc meta tags.
"""

from seohelper.components.description import Description
from seohelper.components.keywords import Keywords
from seohelper.components.misc_tags import MiscTags
from seohelper.components.seo_meta import SeoMeta
from seohelper.components.title import Title
from seohelper.config import SeoHelperConfig, build_config, load_config
from seohelper.core import ConfigError, InvalidArgumentError, SeoHelperError

__all__ = [
    # Façade
    "SeoMeta",
    # Entities
    "Title",
    "Description",
    "Keywords",
    "MiscTags",
    # Config
    "SeoHelperConfig",
    "build_config",
    "load_config",
    # Errors
    "SeoHelperError",
    "InvalidArgumentError",
    "ConfigError",
]
