"""Elliptic-curve helpers: Ed25519 point encoding."""

from .ed25519 import ed25519_decode_point, ed25519_is_valid_point

__all__: tuple[str, ...] = (
    "ed25519_decode_point",
    "ed25519_is_valid_point",
)
