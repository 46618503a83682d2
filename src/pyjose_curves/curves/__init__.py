"""
Canonical domain parameters for the NIST/SEC curves supported by JOSE

Values are the published SEC 2 / FIPS 186 constants.
"""

from .secp256r1 import P256
from .secp384r1 import P384
from .secp521r1 import P521

__all__ = [
    'P256',
    'P384',
    'P521'
]
