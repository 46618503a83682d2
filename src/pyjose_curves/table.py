"""
Elliptic curve parameter table

Maps each supported JOSE curve to its canonical domain parameters and back.
The table is built once at import and is read-only afterwards, so lookups may
be made from any thread without locking.
"""

from typing import Mapping, Optional, Tuple
from types import MappingProxyType
import logging

from .curve import Curve
from .params import CurveParams, DomainParameters
from .curves import P256, P384, P521

logger = logging.getLogger(__name__)

# Insertion order is the reverse lookup order
_TABLE: Mapping[Curve, DomainParameters] = MappingProxyType({
    Curve.P_256: P256,
    Curve.P_384: P384,
    Curve.P_521: P521,
})

# Fields compared by identifier_of, in comparison order. The field prime is
# not compared: it is implied by the field size for these curves.
MATCHED_FIELDS = (
    'field_size',
    'a',
    'b',
    'generator_x',
    'generator_y',
    'order',
    'cofactor',
)


def supported_curves() -> Tuple[Curve, ...]:
    """Get the curves in the table, in reverse lookup order"""
    return tuple(_TABLE)


def parameters_of(curve: Optional[Curve]) -> Optional[DomainParameters]:
    """
    Gets the domain parameters for the specified curve

    Args:
        curve: The JOSE curve, may be None

    Returns:
        The canonical domain parameters, or None if the curve is not one the
        table knows about
    """
    if not isinstance(curve, Curve):
        return None
    return _TABLE.get(curve)


def _first_mismatch(params: CurveParams, canonical: DomainParameters) -> Optional[str]:
    """
    Compare params against a canonical record field by field

    Returns the name of the first field that differs, or None on an exact match.
    """
    for field in MATCHED_FIELDS:
        if getattr(params, field) != getattr(canonical, field):
            return field
    return None


def identifier_of(params: Optional[CurveParams]) -> Optional[Curve]:
    """
    Gets the curve for the specified domain parameters

    Every field in MATCHED_FIELDS must be exactly equal to the canonical value.
    There is no tolerance and no closest match: a one-unit difference in any
    field rejects the candidate.

    Args:
        params: Domain parameters of any object shaped like CurveParams, may
            be None

    Returns:
        The matching curve, or None if params is None or matches none of the
        supported curves
    """
    if params is None:
        return None

    mismatches = []
    for curve, canonical in _TABLE.items():
        field = _first_mismatch(params, canonical)
        if field is None:
            return curve
        mismatches.append(f"{curve}: {field}")

    logger.debug("No curve matches domain parameters (%s)", ", ".join(mismatches))
    return None
