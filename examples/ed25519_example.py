#!/usr/bin/env python3
"""Example: Ed25519 key pair, sign and verify through the handle API and KeyPair."""

from edkeys import (KeyPair, VerifyResult, export_keys, generate, release,
                    sign, verify)

handle = generate()
pub, priv = bytearray(32), bytearray(32)
export_keys(handle, pub, priv)
signature = sign(handle, b"hello")
print("Ed25519 public key:", pub.hex()[:32] + "...")
print("Verify 'hello':", verify(pub, b"hello", signature).name)
print("Verify 'hellp':", verify(pub, b"hellp", signature).name)
print("Verify bad key:", verify(b"\xff" * 32, b"hello", signature).name)
release(handle)

with KeyPair.generate() as kp:
    sig = kp.sign(b"Hello, Ed25519")
    ok = verify(kp.public_key, b"Hello, Ed25519", sig) is VerifyResult.VALID
    print("KeyPair verify:", ok)
