from __future__ import annotations
from typing import List

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from textsign import registry
from textsign.codec import read_key_bytes
from textsign.errors import CryptoFailure, KeyFormatError, SignatureFormatError
from textsign.interfaces import KeyArtifact, PathLike, RandomSource

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


# Curve constants from RFC 8032 section 5.1.
_P = 2 ** 255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def is_valid_point(encoded: bytes) -> bool:
    """Decode a compressed Edwards point per RFC 8032 section 5.1.3.

    Small-order points decode fine and are accepted.
    """
    if len(encoded) != PUBLIC_KEY_SIZE:
        return False
    y = int.from_bytes(encoded, "little")
    sign = y >> 255
    y &= (1 << 255) - 1
    if y >= _P:
        return False
    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = (u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P)) % _P
    vxx = (v * x * x) % _P
    if vxx == (-u) % _P:
        x = (x * _SQRT_M1) % _P
    elif vxx != u:
        return False
    return not (x == 0 and sign == 1)


def _public_bytes(pk: Ed25519PublicKey) -> bytes:
    return pk.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)


def _private_bytes(sk: Ed25519PrivateKey) -> bytes:
    return sk.private_bytes(
        serialization.Encoding.Raw,
        serialization.PrivateFormat.Raw,
        serialization.NoEncryption(),
    )


def _private_from_seed(seed: bytes) -> Ed25519PrivateKey:
    if len(seed) != PRIVATE_KEY_SIZE:
        raise KeyFormatError(f"ed25519 private key must be {PRIVATE_KEY_SIZE} bytes, got {len(seed)}")
    try:
        return Ed25519PrivateKey.from_private_bytes(seed)
    except ValueError as exc:
        raise KeyFormatError(f"invalid ed25519 private key: {exc}") from exc
    except UnsupportedAlgorithm as exc:
        raise CryptoFailure(f"ed25519 is not supported by the crypto backend: {exc}") from exc


class Ed25519Signer:
    def __init__(self, key: Ed25519PrivateKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Signer":
        return cls(_private_from_seed(key))

    @classmethod
    def load(cls, path: PathLike) -> "Ed25519Signer":
        return cls.try_new(read_key_bytes(path))

    def public_key_bytes(self) -> bytes:
        return _public_bytes(self._key.public_key())

    def sign(self, data: bytes) -> bytes:
        try:
            return self._key.sign(data)
        except (TypeError, ValueError) as exc:
            raise CryptoFailure(f"ed25519 signing failed: {exc}") from exc


class Ed25519Verifier:
    """Holds only the public half; it has no way to sign."""

    def __init__(self, key: Ed25519PublicKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Verifier":
        if len(key) != PUBLIC_KEY_SIZE:
            raise KeyFormatError(f"ed25519 public key must be {PUBLIC_KEY_SIZE} bytes, got {len(key)}")
        if not is_valid_point(key):
            raise KeyFormatError("ed25519 public key does not decode to a curve point")
        try:
            return cls(Ed25519PublicKey.from_public_bytes(key))
        except ValueError as exc:
            raise KeyFormatError(f"invalid ed25519 public key: {exc}") from exc
        except UnsupportedAlgorithm as exc:
            raise CryptoFailure(f"ed25519 is not supported by the crypto backend: {exc}") from exc

    @classmethod
    def load(cls, path: PathLike) -> "Ed25519Verifier":
        return cls.try_new(read_key_bytes(path))

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != SIGNATURE_SIZE:
            raise SignatureFormatError(
                f"ed25519 signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
            )
        try:
            self._key.verify(bytes(signature), data)
            return True
        except InvalidSignature:
            return False


@registry.register("ed25519")
class Ed25519Scheme:
    """Asymmetric scheme: private key signs, public key verifies."""
    name = "ed25519"
    signature_size = SIGNATURE_SIZE
    private_key_filename = "ed25519.sk"
    public_key_filename = "ed25519.pk"

    def load_signer(self, path: PathLike) -> Ed25519Signer:
        return Ed25519Signer.load(path)

    def load_verifier(self, path: PathLike) -> Ed25519Verifier:
        return Ed25519Verifier.load(path)

    def keygen(self, random_source: RandomSource) -> List[KeyArtifact]:
        sk = _private_from_seed(random_source(PRIVATE_KEY_SIZE))
        return [
            KeyArtifact(role="secret", filename=self.private_key_filename, data=_private_bytes(sk)),
            KeyArtifact(role="public", filename=self.public_key_filename, data=_public_bytes(sk.public_key())),
        ]
