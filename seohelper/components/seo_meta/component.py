"""
SeoMeta - façade over the title, description, keywords and misc entities.

Builds one of each entity from configuration, forwards getters and
setters to them, and joins their rendered output.

Key behaviors:
- Configuration is validated once, at construction
- Missing config sections give empty entities
- Setters return the façade for chaining
- render() joins the non-empty entity renders with newlines
- One instance per request; setters mutate the owned entities in place
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from seohelper.components.description import Description
from seohelper.components.keywords import Keywords
from seohelper.components.misc_tags import MiscTags
from seohelper.components.title import Title
from seohelper.config.loader import build_config
from seohelper.config.models import SeoHelperConfig
from seohelper.core.ports import Renderable

logger = logging.getLogger(__name__)

TAG_SEPARATOR = "\n"


class SeoMeta:
    """
    SEO meta tags façade.

    Owns exactly one Title, Description, Keywords and MiscTags for its lifetime.
    """

    def __init__(self, config: SeoHelperConfig | Mapping[str, Any] | None = None) -> None:
        """
        Initialize the façade.

        Args:
            config: SeoHelperConfig, or a mapping with optional
                title/description/keywords/misc sections

        Raises:
            ConfigError: If the configuration does not validate
        """
        self._config = build_config(config)
        self._title = Title(self._config.title)
        self._description = Description(self._config.description)
        self._keywords = Keywords(self._config.keywords)
        self._misc = MiscTags(self._config.misc)
        self._current_url = ""

        logger.debug(
            "SeoMeta initialized (title=%r, keywords=%d, metas=%d)",
            self._title.get(),
            len(self._keywords.get()),
            len(self._misc.get_metas()),
        )

    @property
    def config(self) -> SeoHelperConfig:
        return self._config

    # --- Title ---

    def get_title(self) -> str:
        return self._title.get()

    def set_title(
        self,
        title: Any,
        site_name: Any | None = None,
        separator: Any | None = None,
    ) -> SeoMeta:
        """Set the title, and the site name and separator when given."""
        self._title.set(title)

        if site_name is not None:
            self._title.set_site_name(site_name)

        if separator is not None:
            self._title.set_separator(separator)

        return self

    # --- Description ---

    def get_description(self) -> str:
        return self._description.get()

    def set_description(self, content: Any) -> SeoMeta:
        self._description.set(content)
        return self

    # --- Keywords ---

    def get_keywords(self) -> list[str]:
        return self._keywords.get()

    def set_keywords(self, content: Any) -> SeoMeta:
        """
        Replace the keywords.

        Raises:
            InvalidArgumentError: If content is neither a string nor a sequence
        """
        self._keywords.set(content)
        return self

    def add_keyword(self, keyword: Any) -> SeoMeta:
        self._keywords.add(keyword)
        return self

    def add_keywords(self, keywords: Iterable[Any]) -> SeoMeta:
        self._keywords.add_many(keywords)
        return self

    # --- Misc ---

    def get_url(self) -> str:
        return self._current_url

    def set_url(self, url: Any) -> SeoMeta:
        self._current_url = str(url)
        self._misc.set_url(url)
        return self

    def add_meta(self, name: Any, content: Any) -> SeoMeta:
        self._misc.add_meta(name, content)
        return self

    def add_metas(self, metas: Mapping[Any, Any]) -> SeoMeta:
        self._misc.add_metas(metas)
        return self

    def remove_meta(self, names: str | Iterable[str]) -> SeoMeta:
        self._misc.remove_meta(names)
        return self

    # --- Rendering ---

    def _entities(self) -> list[Renderable]:
        return [self._title, self._description, self._keywords, self._misc]

    def render(self) -> str:
        """Render all SEO tags, skipping empty ones."""
        return TAG_SEPARATOR.join(
            output for output in (entity.render() for entity in self._entities()) if output
        )

    def render_title(self) -> str:
        return self._title.render()

    def render_description(self) -> str:
        return self._description.render()

    def render_keywords(self) -> str:
        return self._keywords.render()

    def render_misc(self) -> str:
        return self._misc.render()

    def __str__(self) -> str:
        return self.render()
