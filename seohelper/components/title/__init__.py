"""
Title component - the page <title> tag.
"""

from .component import Title

__all__ = ["Title"]
