"""Public API surface: the normalization operations and reusable specs."""

from .config import ParamSpec, ParamSpecBuilder
from .params import normalize_to_mapping, normalize_to_sequence

__all__ = [
    "ParamSpec",
    "ParamSpecBuilder",
    "normalize_to_mapping",
    "normalize_to_sequence",
]
