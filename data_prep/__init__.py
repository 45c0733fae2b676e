"""
Data preparation — coercing raw inputs and loading scenario files into ProjectionParameters.
"""

from .loader import load_parameters, dump_parameters, parameters_from_mapping
from .validators import CoercionResult, coerce_parameters

__all__ = [
    "load_parameters",
    "dump_parameters",
    "parameters_from_mapping",
    "CoercionResult",
    "coerce_parameters",
]
