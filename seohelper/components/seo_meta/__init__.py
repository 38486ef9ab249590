"""
SeoMeta component - façade rendering every SEO tag of a page.
"""

from .component import TAG_SEPARATOR, SeoMeta

__all__ = ["SeoMeta", "TAG_SEPARATOR"]
