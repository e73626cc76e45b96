"""Core normalization stages.

The stage modules are pure functions over in-memory data; ``normalizer``
wires them together.
"""

from .classifier import InputFormat, classify_input
from .converter import OutputShape
from .normalizer import normalize
from .values import ValueKind, value_kind

__all__ = [
    "InputFormat",
    "OutputShape",
    "ValueKind",
    "classify_input",
    "normalize",
    "value_kind",
]
