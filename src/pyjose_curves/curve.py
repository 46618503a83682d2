"""
JOSE elliptic curve identifiers

The closed set of curves a JWK "crv" member may name for EC keys, along with
their SEC 2 standard names and ASN.1 object identifiers.
"""

from typing import Optional, TYPE_CHECKING
from enum import Enum

if TYPE_CHECKING:
    from .params import CurveParams, DomainParameters


class Curve(Enum):
    """
    A cryptographic curve identifier.

    The enum value is the JOSE name (e.g. "P-256"), so ``Curve("P-256")`` is
    ``Curve.P_256``.
    """

    P_256 = ("P-256", "secp256r1", "1.2.840.10045.3.1.7")
    P_384 = ("P-384", "secp384r1", "1.3.132.0.34")
    P_521 = ("P-521", "secp521r1", "1.3.132.0.35")

    def __new__(cls, jose_name: str, std_name: str, oid: str):
        obj = object.__new__(cls)
        obj._value_ = jose_name
        obj.std_name = std_name
        obj.oid = oid
        return obj

    @property
    def jose_name(self) -> str:
        """The JOSE name, as used in the JWK "crv" member"""
        return self.value

    @classmethod
    def parse(cls, name: str) -> 'Curve':
        """
        Parse a curve from its JOSE name

        Raises:
            ValueError: if the name is empty or not a supported curve
        """
        if not name:
            raise ValueError("Curve name cannot be empty")
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unsupported curve name: {name}") from None

    @classmethod
    def for_std_name(cls, std_name: Optional[str]) -> Optional['Curve']:
        """Get the curve for the given SEC 2 standard name, e.g. "secp384r1" """
        for curve in cls:
            if curve.std_name == std_name:
                return curve
        return None

    @classmethod
    def for_oid(cls, oid: Optional[str]) -> Optional['Curve']:
        """Get the curve for the given dotted ASN.1 object identifier"""
        for curve in cls:
            if curve.oid == oid:
                return curve
        return None

    @classmethod
    def for_domain_parameters(cls, params: Optional['CurveParams']) -> Optional['Curve']:
        """Get the curve whose canonical domain parameters exactly match params"""
        from .table import identifier_of
        return identifier_of(params)

    def to_domain_parameters(self) -> 'DomainParameters':
        """Get the canonical domain parameters for this curve"""
        from .table import parameters_of
        return parameters_of(self)

    def __str__(self) -> str:
        return self.value
