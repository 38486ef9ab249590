from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from seohelper.config.models import SeoHelperConfig
from seohelper.core.errors import ConfigError

logger = logging.getLogger(__name__)


def build_config(data: SeoHelperConfig | Mapping[str, Any] | None) -> SeoHelperConfig:
    """
    Validate a configuration mapping into a SeoHelperConfig.
    None yields the all-defaults config.
    Raises ConfigError if the mapping does not match the schema.
    """
    if isinstance(data, SeoHelperConfig):
        return data
    if data is None:
        return SeoHelperConfig()
    if not isinstance(data, Mapping):
        raise ConfigError([f"config must be a mapping, got {type(data).__name__}"])

    try:
        return SeoHelperConfig.model_validate(dict(data))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '_schema'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(errors) from e


def load_config(path: Path) -> SeoHelperConfig:
    """
    Load and validate an SEO config file.
    Raises FileNotFoundError if file missing.
    Raises ConfigError if the YAML is malformed or the schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"SEO config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError([f"invalid YAML syntax: {e}"]) from e

    # An empty file means "all defaults"
    config = build_config(data)
    logger.info("SEO config loaded from %s", path)
    return config
