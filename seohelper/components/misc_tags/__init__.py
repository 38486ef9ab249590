"""
MiscTags component - free-form meta tags and the canonical link.
"""

from .component import MiscTags

__all__ = ["MiscTags"]
