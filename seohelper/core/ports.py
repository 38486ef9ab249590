"""
Port definitions for renderable SEO entities.
"""

from __future__ import annotations

from typing import Protocol


class Renderable(Protocol):
    """Anything that renders itself to an HTML fragment."""

    def render(self) -> str:
        """Render the HTML fragment, or an empty string when there is nothing to show."""
        ...
