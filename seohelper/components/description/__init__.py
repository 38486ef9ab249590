"""
Description component - the meta description tag.
"""

from .component import Description

__all__ = ["Description"]
