"""
Python JOSE Curves Library

Canonical domain parameters for the elliptic curves used by EC JSON Web Keys
(P-256, P-384 and P-521), and exact lookup in both directions:

- curve -> domain parameters (``parameters_of``)
- domain parameters -> curve (``identifier_of``)

Reverse lookup is meant for probing keys from other libraries or from the
wire against the known curves: a parameter set matches only if every compared
field is exactly equal, and anything else yields None rather than an error.
"""

from .curve import Curve

from .params import (
    CurveParams,
    DomainParameters
)

from .table import (
    parameters_of,
    identifier_of,
    supported_curves,
    MATCHED_FIELDS
)

__version__ = "0.1.0"

__all__ = [
    # Curve identifiers
    "Curve",

    # Domain parameters
    "CurveParams",
    "DomainParameters",

    # Lookup functions
    "parameters_of",
    "identifier_of",
    "supported_curves",
    "MATCHED_FIELDS",
]
