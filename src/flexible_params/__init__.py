"""
Flexible parameters (flexible_params).

Lets a function accept its arguments as a bare value, a flat positional list,
alternating ``name, value`` pairs (optionally ``-name``) or a mapping of names
followed by remaining values, and hands the function one canonical shape: a
name -> value dict or a list ordered by parameter name.
"""

import logging as _logging

from .api.config import ParamSpec, ParamSpecBuilder
from .api.params import normalize_to_mapping, normalize_to_sequence
from .core.classifier import InputFormat
from .core.converter import OutputShape
from .core.values import ValueKind
from .mixin import ParamParser
from .registry import (
    SignatureDescriptor,
    clear_signatures,
    dispatch,
    find_signature,
    list_signatures,
    load_pyproject_signatures,
    normalize_for,
    register_signature,
    unregister_signature,
)

# Provide a default no-op handler to avoid "No handler" warnings for library users.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "v0.1.0"

__all__ = [
    "InputFormat",
    "OutputShape",
    "ParamParser",
    "ParamSpec",
    "ParamSpecBuilder",
    "SignatureDescriptor",
    "ValueKind",
    "clear_signatures",
    "dispatch",
    "find_signature",
    "list_signatures",
    "load_pyproject_signatures",
    "normalize_for",
    "normalize_to_mapping",
    "normalize_to_sequence",
    "register_signature",
    "unregister_signature",
]
