"""
Analyzer - field classification and model synthesis.
"""

from __future__ import annotations

from .field_classifier import BUILTIN_SCALARS, TYPE_MAP, classify_field, is_relation_type, map_type
from .model_synthesizer import build_model

__all__ = [
    "BUILTIN_SCALARS",
    "TYPE_MAP",
    "build_model",
    "classify_field",
    "is_relation_type",
    "map_type",
]
