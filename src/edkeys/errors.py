"""Exceptions raised by the owning KeyPair wrapper."""


class Ed25519Error(Exception):
    """Base class for edkeys errors."""


class KeyGenerationError(Ed25519Error):
    """The provider could not generate a key pair."""


class SigningError(Ed25519Error):
    """The provider could not sign the message."""


class KeyPairClosedError(Ed25519Error):
    """The key pair was used after close()."""


__all__: tuple[str, ...] = (
    "Ed25519Error",
    "KeyGenerationError",
    "KeyPairClosedError",
    "SigningError",
)
