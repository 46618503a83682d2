"""
secp256r1 (P-256) domain parameters
"""

from ..params import DomainParameters


P256 = DomainParameters(
    # Bit length of the prime field
    field_size=256,

    # Curve field prime (p)
    field_prime=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,

    # Curve parameters for y^2 = x^3 + ax + b
    a=0xffffffff00000001000000000000000000000000fffffffffffffffffffffffc,
    b=0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,

    # Generator point coordinates
    generator_x=0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
    generator_y=0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5,

    # Scalar field prime (n) - order of the base point
    order=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,

    cofactor=1,
)
