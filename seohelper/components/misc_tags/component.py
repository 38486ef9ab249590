"""
MiscTags entity - free-form <meta> tags plus the canonical link.

Key behaviors:
- Metas keep insertion order; re-adding a name replaces its content in place
- Robots "noindex, nofollow" and config default metas are seeded on creation
- Canonical <link> is rendered after the metas when a URL is set and enabled
- Metas with empty content render nothing
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from seohelper.config.models import ROBOTS_CONTENT, MiscConfig
from seohelper.core.html import MetaTag, render_link_tag


class MiscTags:
    """Miscellaneous meta tags entity."""

    def __init__(self, config: MiscConfig | None = None) -> None:
        config = config or MiscConfig()
        self._canonical = config.canonical
        self._robots = config.robots
        self._defaults = dict(config.default)
        self._metas: dict[str, str] = {}
        self._url = ""
        self._seed()

    def _seed(self) -> None:
        if self._robots:
            self.add_meta("robots", ROBOTS_CONTENT)
        self.add_metas(self._defaults)

    # --- Metas ---

    def get_metas(self) -> dict[str, str]:
        return dict(self._metas)

    def get_tags(self) -> list[MetaTag]:
        """The metas as MetaTag values, in insertion order."""
        return [MetaTag(name=name, content=content) for name, content in self._metas.items()]

    def add_meta(self, name: Any, content: Any) -> MiscTags:
        self._metas[str(name)] = str(content)
        return self

    def add_metas(self, metas: Mapping[Any, Any]) -> MiscTags:
        for name, content in metas.items():
            self.add_meta(name, content)
        return self

    def remove_meta(self, names: str | Iterable[str]) -> MiscTags:
        """Remove one meta or many; unknown names are ignored."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            self._metas.pop(name, None)
        return self

    def reset(self) -> MiscTags:
        """Drop every meta and the URL."""
        self._metas = {}
        self._url = ""
        return self

    # --- URL ---

    def get_url(self) -> str:
        return self._url

    def has_url(self) -> bool:
        return bool(self._url)

    def set_url(self, url: Any) -> MiscTags:
        self._url = str(url)
        return self

    # --- Rendering ---

    def render(self) -> str:
        tags = [tag.render() for tag in self.get_tags()]

        if self._canonical:
            tags.append(render_link_tag("canonical", self._url))

        return "\n".join(tag for tag in tags if tag)
