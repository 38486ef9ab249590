from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def example_config_path() -> Path:
    """The example config shipped at the project root."""
    return PROJECT_ROOT / "seo_helper.yaml"
