"""
Ed25519 key service: generate, export, sign, verify over opaque key pair handles.
Signing and verification are delegated to the `cryptography` package (OpenSSL).
"""

from .__about__ import __version__
from .constants import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from .curves import ed25519_decode_point, ed25519_is_valid_point
from .errors import (Ed25519Error, KeyGenerationError, KeyPairClosedError,
                     SigningError)
from .service import (KeyPair, KeyPairHandle, VerifyResult, export_keys,
                      generate, release, sign, verify, verify_signature)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Sizes
    "PUBLIC_KEY_SIZE",
    "PRIVATE_KEY_SIZE",
    "SIGNATURE_SIZE",
    # Handle API
    "KeyPairHandle",
    "VerifyResult",
    "generate",
    "release",
    "export_keys",
    "sign",
    "verify",
    # Owning wrapper
    "KeyPair",
    "verify_signature",
    # Curves: Ed25519 point encoding
    "ed25519_decode_point",
    "ed25519_is_valid_point",
    # Errors
    "Ed25519Error",
    "KeyGenerationError",
    "KeyPairClosedError",
    "SigningError",
)
