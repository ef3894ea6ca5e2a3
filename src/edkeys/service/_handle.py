"""
Handle-level Ed25519 key service: generate, release, export, sign, verify.

Every function tolerates None and malformed arguments and reports failure
through its return value; nothing here raises on bad input. Key generation,
signing and verification are delegated to the `cryptography` package
(OpenSSL EVP Ed25519).
"""

from __future__ import annotations

import enum
import logging
from typing import Any

from cryptography.exceptions import (InternalError, InvalidSignature,
                                     UnsupportedAlgorithm)
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..constants import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from ..curves.ed25519 import ed25519_is_valid_point

logger = logging.getLogger(__name__)

# Provider failures that are reported as a result instead of raised.
_PROVIDER_ERRORS: tuple[type[BaseException], ...] = (
    UnsupportedAlgorithm,
    InternalError,
    MemoryError,
)
_KEY_IMPORT_ERRORS = (ValueError,) + _PROVIDER_ERRORS


class VerifyResult(enum.IntEnum):
    """Outcome of verify(). Integer values match the boundary return codes."""

    ERROR = -1
    INVALID = 0
    VALID = 1


class KeyPairHandle:
    """
    Opaque reference to one provider-side Ed25519 key pair.

    Created by generate(), invalidated by release(). The key material never
    changes while the handle is live.
    """

    __slots__ = ("_key",)

    def __init__(self, key: ed25519.Ed25519PrivateKey) -> None:
        self._key: ed25519.Ed25519PrivateKey | None = key

    @property
    def released(self) -> bool:
        return self._key is None

    def __repr__(self) -> str:
        state = "released" if self._key is None else "live"
        return f"<KeyPairHandle {state} at {id(self):#x}>"


def _key_of(handle: Any) -> ed25519.Ed25519PrivateKey | None:
    if not isinstance(handle, KeyPairHandle):
        return None
    return handle._key


def _byte_view(buf: Any, size: int) -> memoryview | None:
    """Writable flat byte view of buf holding at least size bytes, else None."""
    try:
        view = memoryview(buf).cast("B")
    except TypeError:
        return None
    if view.readonly or len(view) < size:
        view.release()
        return None
    return view


def _exact_bytes(data: Any, size: int) -> bytes | None:
    try:
        raw = memoryview(data).tobytes()
    except TypeError:
        return None
    if len(raw) != size:
        return None
    return raw


def _message_span(message: Any, length: int | None) -> bytes | None:
    """The first length bytes of message (all of it when length is None)."""
    try:
        raw = memoryview(message).tobytes()
    except TypeError:
        return None
    if length is None:
        return raw
    if isinstance(length, bool) or not isinstance(length, int):
        return None
    if length < 0 or length > len(raw):
        return None
    return raw[:length]


def generate() -> KeyPairHandle | None:
    """
    Generate a fresh Ed25519 key pair from the provider's CSPRNG.

    Returns:
        A live handle owned by the caller, or None if the provider failed.
    """
    try:
        key = ed25519.Ed25519PrivateKey.generate()
    except _PROVIDER_ERRORS as exc:
        logger.warning("Ed25519 key generation failed: %s", exc)
        return None
    handle = KeyPairHandle(key)
    logger.debug("Generated Ed25519 key pair %#x", id(handle))
    return handle


def release(handle: KeyPairHandle | None) -> None:
    """Drop the provider key held by handle. None and released handles are ignored."""
    if _key_of(handle) is None:
        return
    handle._key = None
    logger.debug("Released Ed25519 key pair %#x", id(handle))


def export_keys(handle: KeyPairHandle | None, public_out: Any, private_out: Any) -> bool:
    """
    Copy the raw public key and private seed into caller buffers.

    Args:
        handle: Live handle from generate().
        public_out: Writable buffer of at least PUBLIC_KEY_SIZE bytes.
        private_out: Writable buffer of at least PRIVATE_KEY_SIZE bytes.

    Returns:
        True if both buffers were written. On False neither buffer was touched.
    """
    key = _key_of(handle)
    if key is None:
        return False
    public_view = _byte_view(public_out, PUBLIC_KEY_SIZE)
    private_view = _byte_view(private_out, PRIVATE_KEY_SIZE)
    try:
        if public_view is None or private_view is None:
            return False
        public_raw = key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        private_raw = key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_view[:PUBLIC_KEY_SIZE] = public_raw
        private_view[:PRIVATE_KEY_SIZE] = private_raw
        return True
    finally:
        for view in (public_view, private_view):
            if view is not None:
                view.release()


def sign(
    handle: KeyPairHandle | None,
    message: Any,
    length: int | None = None,
    out: Any = None,
) -> bytes | None:
    """
    Ed25519 signature of message[:length] (RFC 8032 5.1.6, no pre-hash).

    Deterministic: the same handle and message always give the same bytes.

    Args:
        handle: Live handle from generate().
        message: Bytes-like message; may be empty.
        length: Number of leading bytes to sign; None signs the whole message.
        out: Optional writable buffer of at least SIGNATURE_SIZE bytes that
            also receives the signature.

    Returns:
        64-byte signature, or None on invalid input or provider failure (out
        is not written then).
    """
    key = _key_of(handle)
    if key is None:
        return None
    data = _message_span(message, length)
    if data is None:
        return None
    view = None
    if out is not None:
        view = _byte_view(out, SIGNATURE_SIZE)
        if view is None:
            return None
    try:
        try:
            signature = key.sign(data)
        except _PROVIDER_ERRORS as exc:
            logger.warning("Ed25519 signing failed: %s", exc)
            return None
        if view is not None:
            view[:SIGNATURE_SIZE] = signature
        return signature
    finally:
        if view is not None:
            view.release()


def verify(
    public_key: Any,
    message: Any,
    signature: Any,
    length: int | None = None,
) -> VerifyResult:
    """
    Check an Ed25519 signature (RFC 8032 5.1.7) against a raw public key.

    Args:
        public_key: 32-byte compressed public key.
        message: Bytes-like message; may be empty.
        signature: 64-byte signature (R || S).
        length: Number of leading message bytes covered; None for all of it.

    Returns:
        VALID if the signature matches, INVALID if it does not, ERROR if the
        inputs are malformed (including a key that is not a curve point) or
        the provider failed.
    """
    key_raw = _exact_bytes(public_key, PUBLIC_KEY_SIZE)
    signature_raw = _exact_bytes(signature, SIGNATURE_SIZE)
    data = _message_span(message, length)
    if key_raw is None or signature_raw is None or data is None:
        logger.debug("verify: malformed public key, signature or message")
        return VerifyResult.ERROR
    if not ed25519_is_valid_point(key_raw):
        logger.debug("verify: public key does not decode to a curve point")
        return VerifyResult.ERROR
    try:
        verifier = ed25519.Ed25519PublicKey.from_public_bytes(key_raw)
        verifier.verify(signature_raw, data)
    except InvalidSignature:
        return VerifyResult.INVALID
    except _KEY_IMPORT_ERRORS as exc:
        logger.debug("verify: provider error: %s", exc)
        return VerifyResult.ERROR
    return VerifyResult.VALID


__all__: tuple[str, ...] = (
    "KeyPairHandle",
    "VerifyResult",
    "export_keys",
    "generate",
    "release",
    "sign",
    "verify",
)
