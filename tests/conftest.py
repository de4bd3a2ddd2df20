from __future__ import annotations

from typing import Dict

import pytest

from compdocs.models import ComponentData
from compdocs.parsing.factory import ComponentParserFactory
from tests._fixtures.declarations import SAMPLE_DECLARATIONS


@pytest.fixture
def factory() -> ComponentParserFactory:
    return ComponentParserFactory()


@pytest.fixture
def components(factory: ComponentParserFactory) -> Dict[str, ComponentData]:
    """Components parsed from the shared sample declarations."""
    return factory.parse_component_metadata(SAMPLE_DECLARATIONS)
