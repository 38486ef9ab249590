"""
Description entity - the <meta name="description"> tag.
"""

from __future__ import annotations

from typing import Any

from seohelper.config.models import DescriptionConfig
from seohelper.core.html import limit_text, render_meta_tag


class Description:
    """Meta description entity."""

    def __init__(self, config: DescriptionConfig | None = None) -> None:
        config = config or DescriptionConfig()
        self._content = config.description
        self._max = config.max

    def get(self) -> str:
        return self._content

    def set(self, content: Any) -> Description:
        self._content = str(content)
        return self

    def get_max(self) -> int | None:
        return self._max

    def set_max(self, max_length: int | None) -> Description:
        """Set the content length limit; None or a non-positive value disables it."""
        self._max = max_length if max_length and max_length > 0 else None
        return self

    def render(self) -> str:
        return render_meta_tag("description", limit_text(self._content, self._max))
