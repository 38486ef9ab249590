"""
Title entity - the page <title> tag.

Key behaviors:
- Composes "{title}{separator}{site_name}" (or the reverse when not title-first)
- Falls back to the configured default title when no title is set
- Applies the max length to the composed text at render time
- Renders nothing when neither title nor site name is available
"""

from __future__ import annotations

from typing import Any

from seohelper.config.models import TitleConfig
from seohelper.core.html import limit_text, render_title_tag


class Title:
    """Page title entity."""

    def __init__(self, config: TitleConfig | None = None) -> None:
        config = config or TitleConfig()
        self._title = config.title
        self._default = config.default
        self._site_name = config.site_name
        self._separator = config.separator
        self._first = config.first
        self._max = config.max

    # --- Getters & Setters ---

    def get(self) -> str:
        return self._title

    def set(self, value: Any) -> Title:
        self._title = str(value)
        return self

    def get_default(self) -> str:
        return self._default

    def get_site_name(self) -> str:
        return self._site_name

    def set_site_name(self, name: Any) -> Title:
        self._site_name = str(name)
        return self

    def get_separator(self) -> str:
        return self._separator

    def set_separator(self, separator: Any) -> Title:
        self._separator = str(separator)
        return self

    def is_title_first(self) -> bool:
        return self._first

    def set_first(self) -> Title:
        """Render the title before the site name."""
        self._first = True
        return self

    def set_last(self) -> Title:
        """Render the site name before the title."""
        self._first = False
        return self

    def get_max(self) -> int | None:
        return self._max

    def set_max(self, max_length: int | None) -> Title:
        """Set the title length limit; None or a non-positive value disables it."""
        self._max = max_length if max_length and max_length > 0 else None
        return self

    # --- Rendering ---

    def text(self) -> str:
        """The composed title text, limited to max, before escaping."""
        title = self._title or self._default

        if not self._site_name:
            composed = title
        elif not title:
            composed = self._site_name
        elif self._first:
            composed = f"{title}{self._separator}{self._site_name}"
        else:
            composed = f"{self._site_name}{self._separator}{title}"

        return limit_text(composed, self._max)

    def render(self) -> str:
        return render_title_tag(self.text())
