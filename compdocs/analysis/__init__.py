"""Semantic classification of component properties."""

from __future__ import annotations

from .classifier import ClassifierVocabulary, PropertyClassifier
from .purpose import PurposeInference
from .semantic import SemanticAnalyzer

__all__ = [
    "ClassifierVocabulary",
    "PropertyClassifier",
    "PurposeInference",
    "SemanticAnalyzer",
]
