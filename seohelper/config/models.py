"""
Typed SEO helper configuration.

Every section and field is optional; missing values fall back to
empty entities.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SEPARATOR = " - "
DEFAULT_TITLE_MAX = 55
DEFAULT_DESCRIPTION_MAX = 155
ROBOTS_CONTENT = "noindex, nofollow"


def split_keywords(value: str) -> list[str]:
    """Split a comma separated keyword string into stripped, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class SectionConfig(BaseModel):
    """Base for config sections: numbers become strings, null keys fall back to defaults."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Fields where null is a meaningful value rather than "unset"
    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"max"})

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A bare `site_name:` key in YAML loads as None
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if value is not None or key in cls.NULLABLE_FIELDS
            }
        return data


class TitleConfig(SectionConfig):
    title: str = ""
    default: str = ""
    site_name: str = ""
    separator: str = DEFAULT_SEPARATOR
    first: bool = True
    max: int | None = Field(default=DEFAULT_TITLE_MAX, gt=0)


class DescriptionConfig(SectionConfig):
    description: str = ""
    max: int | None = Field(default=DEFAULT_DESCRIPTION_MAX, gt=0)


class KeywordsConfig(SectionConfig):
    default: list[str] = Field(default_factory=list)

    @field_validator("default", mode="before")
    @classmethod
    def _split_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_keywords(value)
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("default")
    @classmethod
    def _strip_items(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item.strip()]


class MiscConfig(SectionConfig):
    canonical: bool = True
    robots: bool = False
    default: dict[str, str] = Field(default_factory=dict)

    @field_validator("default", mode="before")
    @classmethod
    def _null_content(cls, value: Any) -> Any:
        # `author:` with no value is an empty meta, skipped at render
        if isinstance(value, dict):
            return {key: "" if content is None else content for key, content in value.items()}
        return value


class SeoHelperConfig(BaseModel):
    title: TitleConfig = Field(default_factory=TitleConfig)
    description: DescriptionConfig = Field(default_factory=DescriptionConfig)
    keywords: KeywordsConfig = Field(default_factory=KeywordsConfig)
    misc: MiscConfig = Field(default_factory=MiscConfig)

    @field_validator("title", "description", "keywords", "misc", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        # A bare `title:` key in YAML loads as None
        return {} if value is None else value
