"""
Ed25519 compressed point decoding (RFC 8032 5.1.3).

Only classifies 32-byte public keys; signing and verification belong to the
provider. Pure Python; compiled with Cython at build time.
"""

from __future__ import annotations

# Field prime p = 2^255 - 19
_P = 2**255 - 19
# Curve constant d = -121665/121666 (mod p)
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
# sqrt(-1) mod p
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

_Y_MASK = (1 << 255) - 1


def _recover_x(y: int, sign: int) -> int | None:
    """x for the given y and sign bit, or None when y is not on the curve."""
    if y >= _P:
        return None
    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x2 = u * pow(v, _P - 2, _P) % _P
    if x2 == 0:
        if sign:
            return None
        return 0
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P != 0:
        x = x * _SQRT_M1 % _P
        if (x * x - x2) % _P != 0:
            return None
    if (x & 1) != sign:
        x = _P - x
    return x


def ed25519_decode_point(
    encoded: bytes | bytearray | memoryview,
) -> tuple[int, int, int, int] | None:
    """
    Decode a compressed Ed25519 point.

    Args:
        encoded: 32 bytes-like, little-endian y with the sign of x in the top bit.

    Returns:
        Extended coordinates (X, Y, Z, T), or None if the bytes do not encode
        a point on the curve.
    """
    raw = memoryview(encoded).tobytes()
    if len(raw) != 32:
        return None
    n = int.from_bytes(raw, "little")
    x = _recover_x(n & _Y_MASK, n >> 255)
    if x is None:
        return None
    y = n & _Y_MASK
    return (x, y, 1, (x * y) % _P)


def ed25519_is_valid_point(encoded: bytes | bytearray | memoryview) -> bool:
    """True iff encoded is a canonical compressed point on Ed25519."""
    return ed25519_decode_point(encoded) is not None


__all__: tuple[str, ...] = (
    "ed25519_decode_point",
    "ed25519_is_valid_point",
)
