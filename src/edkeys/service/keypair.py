"""Owning wrapper around a KeyPairHandle, released on close() or scope exit."""

from __future__ import annotations

from types import TracebackType

from ..constants import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from ..errors import KeyGenerationError, KeyPairClosedError, SigningError
from . import _handle as handles
from ._handle import KeyPairHandle, VerifyResult

_BYTES_LIKE = (bytes, bytearray, memoryview)


def verify_signature(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    True iff signature is a valid Ed25519 signature of message under public_key.

    Wrong key or signature sizes give False without calling the provider.
    Use verify() when a malformed key must be told apart from a bad signature.
    """
    if (
        memoryview(public_key).nbytes != PUBLIC_KEY_SIZE
        or memoryview(signature).nbytes != SIGNATURE_SIZE
    ):
        return False
    return handles.verify(public_key, message, signature) is VerifyResult.VALID


class KeyPair:
    """
    Ed25519 key pair that owns its provider handle.

    Use as a context manager so the handle is released on exit:

        with KeyPair.generate() as kp:
            sig = kp.sign(b"hello")

    Raw keys are exported once at construction and stay readable after close().
    """

    __slots__ = ("_handle", "_public_key", "_private_key")

    def __init__(self, handle: KeyPairHandle) -> None:
        if not isinstance(handle, KeyPairHandle):
            raise TypeError(f"expected KeyPairHandle, got {type(handle).__name__}")
        public_key = bytearray(PUBLIC_KEY_SIZE)
        private_key = bytearray(PRIVATE_KEY_SIZE)
        if not handles.export_keys(handle, public_key, private_key):
            raise ValueError("handle is released")
        self._handle: KeyPairHandle | None = handle
        self._public_key = bytes(public_key)
        self._private_key = bytes(private_key)

    @classmethod
    def generate(cls) -> KeyPair:
        handle = handles.generate()
        if handle is None:
            raise KeyGenerationError("Ed25519 key generation failed")
        return cls(handle)

    @property
    def public_key(self) -> bytes:
        return self._public_key

    @property
    def private_key(self) -> bytes:
        return self._private_key

    @property
    def closed(self) -> bool:
        return self._handle is None

    def sign(self, message: bytes) -> bytes:
        """64-byte deterministic signature of message."""
        if not isinstance(message, _BYTES_LIKE):
            raise TypeError(f"message must be bytes-like, got {type(message).__name__}")
        if self._handle is None:
            raise KeyPairClosedError("sign() on a closed KeyPair")
        signature = handles.sign(self._handle, message)
        if signature is None:
            raise SigningError("Ed25519 signing failed")
        return signature

    def verify(self, message: bytes, signature: bytes) -> bool:
        return verify_signature(self._public_key, message, signature)

    def close(self) -> None:
        handle, self._handle = self._handle, None
        handles.release(handle)

    def __enter__(self) -> KeyPair:
        if self._handle is None:
            raise KeyPairClosedError("KeyPair is closed")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = " closed" if self._handle is None else ""
        return f"<KeyPair{state} public_key={self._public_key.hex()}>"


__all__: tuple[str, ...] = (
    "KeyPair",
    "verify_signature",
)
