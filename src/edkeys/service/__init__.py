"""Ed25519 key service: opaque handles plus the owning KeyPair wrapper."""

from ._handle import (KeyPairHandle, VerifyResult, export_keys, generate,
                      release, sign, verify)
from .keypair import KeyPair, verify_signature

__all__: tuple[str, ...] = (
    "KeyPair",
    "KeyPairHandle",
    "VerifyResult",
    "export_keys",
    "generate",
    "release",
    "sign",
    "verify",
    "verify_signature",
)
