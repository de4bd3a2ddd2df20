"""Parse annotated component declarations and synthesize usage examples."""

from __future__ import annotations

from .generation.examples import ExampleOptions
from .parsing.factory import ComponentParser, ComponentParserFactory

__version__ = "0.1.0"

__all__ = ["ComponentParser", "ComponentParserFactory", "ExampleOptions", "__version__"]
