"""
Tests for SEO config validation and YAML loading.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from seohelper.components.seo_meta import SeoMeta
from seohelper.config import SeoHelperConfig, build_config, load_config
from seohelper.core.errors import ConfigError


class TestBuildConfig:
    """Mapping validation."""

    def test_none_gives_defaults(self) -> None:
        """None is the all-defaults config."""
        config = build_config(None)
        assert config.title.separator == " - "
        assert config.title.max == 55
        assert config.description.max == 155
        assert config.keywords.default == []
        assert config.misc.canonical is True
        assert config.misc.robots is False

    def test_model_passthrough(self) -> None:
        """A model instance is returned unchanged."""
        config = SeoHelperConfig()
        assert build_config(config) is config

    def test_null_section_gives_defaults(self) -> None:
        """A section set to None behaves as missing."""
        config = build_config({"title": None, "misc": None})
        assert config.title.title == ""
        assert config.misc.default == {}

    def test_keywords_default_string_split(self) -> None:
        """Keyword defaults may be a comma string."""
        config = build_config({"keywords": {"default": "a, b"}})
        assert config.keywords.default == ["a", "b"]

    def test_unknown_keys_ignored(self) -> None:
        """Unrecognized keys do not fail."""
        config = build_config({"webmasters": {"google": "x"}, "title": {"title": "Home"}})
        assert config.title.title == "Home"

    def test_numbers_coerced_to_strings(self) -> None:
        """Numeric YAML scalars become strings."""
        config = build_config(
            {
                "title": {"title": 404, "site_name": 1984},
                "keywords": {"default": ["seo", 2024]},
                "misc": {"default": {"rating": 5}},
            }
        )
        assert config.title.title == "404"
        assert config.title.site_name == "1984"
        assert config.keywords.default == ["seo", "2024"]
        assert config.misc.default == {"rating": "5"}

    def test_null_fields_fall_back_to_defaults(self) -> None:
        """Bare keys load as None and behave as missing."""
        config = build_config(
            {
                "title": {"site_name": None, "separator": None, "first": None},
                "description": {"description": None},
                "keywords": {"default": None},
                "misc": {"canonical": None, "default": None},
            }
        )
        assert config.title.site_name == ""
        assert config.title.separator == " - "
        assert config.title.first is True
        assert config.description.description == ""
        assert config.keywords.default == []
        assert config.misc.canonical is True
        assert config.misc.default == {}

    def test_null_max_disables_limit(self) -> None:
        """max: null means no limit rather than the default."""
        config = build_config({"title": {"max": None}, "description": {"max": None}})
        assert config.title.max is None
        assert config.description.max is None

    def test_null_meta_content_is_empty(self) -> None:
        """A bare misc default key is an empty meta."""
        config = build_config({"misc": {"default": {"author": None}}})
        assert config.misc.default == {"author": ""}

    def test_non_positive_max_rejected(self) -> None:
        """max must be positive."""
        with pytest.raises(ConfigError):
            build_config({"description": {"max": 0}})

    def test_non_mapping_rejected(self) -> None:
        """A list is not a config."""
        with pytest.raises(ConfigError) as exc_info:
            build_config(["title"])  # type: ignore[arg-type]
        assert "mapping" in str(exc_info.value)


class TestLoadConfig:
    """YAML file loading."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML raises ConfigError."""
        path = tmp_path / "seo.yaml"
        path.write_text("title: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty file is the all-defaults config."""
        path = tmp_path / "seo.yaml"
        path.write_text("")
        assert load_config(path) == SeoHelperConfig()

    def test_logs_load(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Loading is logged."""
        path = tmp_path / "seo.yaml"
        path.write_text("title:\n  title: Home\n")
        with caplog.at_level(logging.INFO, logger="seohelper.config.loader"):
            config = load_config(path)
        assert config.title.title == "Home"
        assert "SEO config loaded" in caplog.text

    def test_yaml_scalars_build_seo_meta(self, tmp_path: Path) -> None:
        """Numeric and bare YAML values load and render."""
        path = tmp_path / "seo.yaml"
        path.write_text(
            "title:\n"
            "  title: Home\n"
            "  site_name: 1984\n"
            "  separator:\n"
            "keywords:\n"
            "  default: [seo, 2024]\n"
            "misc:\n"
            "  default:\n"
            "    rating: 5\n"
            "    author:\n"
        )
        seo_meta = SeoMeta(load_config(path))

        assert seo_meta.render().split("\n") == [
            "<title>Home - 1984</title>",
            '<meta name="keywords" content="seo, 2024">',
            '<meta name="rating" content="5">',
        ]

    def test_example_config(self, example_config_path: Path) -> None:
        """The shipped example config renders a full head."""
        seo_meta = SeoMeta(load_config(example_config_path))
        seo_meta.set_title("Home").set_url("https://example.com/")

        assert seo_meta.render().split("\n") == [
            "<title>Home - Company</title>",
            '<meta name="description" content="Default description">',
            '<meta name="keywords" content="seo, helper">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
            '<link rel="canonical" href="https://example.com/">',
        ]
