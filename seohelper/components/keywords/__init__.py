"""
Keywords component - the meta keywords tag.
"""

from .component import KEYWORDS_SEPARATOR, Keywords, normalize_keywords

__all__ = [
    "Keywords",
    "normalize_keywords",
    "KEYWORDS_SEPARATOR",
]
