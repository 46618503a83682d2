"""
Elliptic curve domain parameters

This module defines the record holding the numeric constants of a prime-field
Weierstrass curve y^2 = x^3 + ax + b (mod p), and the structural protocol that
reverse lookups accept.
"""

from typing import Protocol, Tuple
from dataclasses import dataclass


class CurveParams(Protocol):
    """Protocol defining the interface for elliptic curve domain parameters"""

    # Bit length of the prime field
    field_size: int

    # Curve field prime (p)
    field_prime: int

    # Curve parameters for y^2 = x^3 + ax + b
    a: int
    b: int

    # Generator point coordinates
    generator_x: int
    generator_y: int

    # Order of the subgroup generated by the base point (n)
    order: int

    # Cofactor (h)
    cofactor: int


@dataclass(frozen=True)
class DomainParameters:
    """
    Domain parameters of a named curve

    Instances are immutable, so the canonical records can be shared between
    callers and threads without copying.
    """
    field_size: int
    field_prime: int
    a: int
    b: int
    generator_x: int
    generator_y: int
    order: int
    cofactor: int

    @property
    def coord_bytes(self) -> int:
        """Byte length of a single field element (e.g. 66 for P-521)"""
        return (self.field_size + 7) // 8

    @property
    def generator(self) -> Tuple[int, int]:
        """The base point as an affine (x, y) tuple"""
        return (self.generator_x, self.generator_y)

    def __repr__(self) -> str:
        return (
            f"DomainParameters(field_size={self.field_size}, "
            f"field_prime={self.field_prime:#x}, order={self.order:#x}, "
            f"cofactor={self.cofactor})"
        )
