"""Core types: module identity, parse errors, canonical JSON."""

from sumforge.core.module_version import ModuleVersion
from sumforge.core.errors import Position, SumSyntaxError, SumErrorList
from sumforge.core.json_canonical import canonical_json_dumps, canonical_json_loads

__all__ = [
    "ModuleVersion",
    "Position",
    "SumSyntaxError",
    "SumErrorList",
    "canonical_json_dumps",
    "canonical_json_loads",
]
