"""Example synthesis for parsed components."""

from __future__ import annotations

from .composite import CompositeDetector
from .examples import ExampleGenerator, ExampleOptions
from .values import ValueGenerator

__all__ = ["CompositeDetector", "ExampleGenerator", "ExampleOptions", "ValueGenerator"]
