"""
Keywords entity - the <meta name="keywords"> tag.

Key behaviors:
- Keeps keywords in insertion order, duplicates allowed
- Accepts a comma separated string or a sequence of strings
- Rejects any other value with InvalidArgumentError
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from seohelper.config.models import KeywordsConfig, split_keywords
from seohelper.core.errors import InvalidArgumentError
from seohelper.core.html import render_meta_tag

KEYWORDS_SEPARATOR = ", "


def normalize_keywords(content: Any) -> list[str]:
    """
    Normalize keyword content to a list of strings.

    Strings are split on commas; sequences are kept item by item.
    Empty items are dropped in both cases.
    """
    if isinstance(content, str):
        return split_keywords(content)

    if isinstance(content, (bytes, bytearray)):
        raise InvalidArgumentError("Keywords must be text, got bytes")

    if isinstance(content, Sequence):
        items = (str(item).strip() for item in content)
        return [item for item in items if item]

    raise InvalidArgumentError(
        f"Keywords must be a string or a sequence of strings, got {type(content).__name__}"
    )


class Keywords:
    """Meta keywords entity."""

    def __init__(self, config: KeywordsConfig | None = None) -> None:
        config = config or KeywordsConfig()
        self._items: list[str] = list(config.default)

    def get(self) -> list[str]:
        return list(self._items)

    def set(self, content: Any) -> Keywords:
        self._items = normalize_keywords(content)
        return self

    def add(self, keyword: Any) -> Keywords:
        """Append one keyword; blank keywords are ignored."""
        keyword = str(keyword).strip()
        if keyword:
            self._items.append(keyword)
        return self

    def add_many(self, keywords: Iterable[Any]) -> Keywords:
        for keyword in keywords:
            self.add(keyword)
        return self

    def render(self) -> str:
        return render_meta_tag("keywords", KEYWORDS_SEPARATOR.join(self._items))
