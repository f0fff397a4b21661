from __future__ import annotations
import hmac
from typing import List

import blake3

from textsign import registry
from textsign.codec import read_key_bytes
from textsign.errors import CryptoFailure, KeyFormatError
from textsign.interfaces import KeyArtifact, PathLike, RandomSource

KEY_SIZE = 32
DIGEST_SIZE = 32


class Blake3Signer:
    """Keyed BLAKE3 over the whole input. One object both signs and verifies."""

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_SIZE:
            raise KeyFormatError(f"blake3 key must be {KEY_SIZE} bytes, got {len(key)}")
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key: bytes) -> "Blake3Signer":
        # Longer material is truncated to the first 32 bytes, not rejected.
        if len(key) < KEY_SIZE:
            raise KeyFormatError(f"blake3 key needs at least {KEY_SIZE} bytes, got {len(key)}")
        return cls(key[:KEY_SIZE])

    @classmethod
    def load(cls, path: PathLike) -> "Blake3Signer":
        return cls.try_new(read_key_bytes(path))

    def _keyed_hash(self, data: bytes) -> bytes:
        try:
            return blake3.blake3(data, key=self._key).digest(length=DIGEST_SIZE)
        except (TypeError, ValueError) as exc:
            raise CryptoFailure(f"blake3 keyed hash failed: {exc}") from exc

    def sign(self, data: bytes) -> bytes:
        return self._keyed_hash(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        return hmac.compare_digest(self._keyed_hash(data), bytes(signature))


@registry.register("blake3")
class Blake3Scheme:
    """Symmetric scheme: the same 32-byte secret signs and verifies."""
    name = "blake3"
    signature_size = DIGEST_SIZE
    key_filename = "blake3.txt"

    def load_signer(self, path: PathLike) -> Blake3Signer:
        return Blake3Signer.load(path)

    def load_verifier(self, path: PathLike) -> Blake3Signer:
        return Blake3Signer.load(path)

    def keygen(self, random_source: RandomSource) -> List[KeyArtifact]:
        key = random_source(KEY_SIZE)
        return [KeyArtifact(role="secret", filename=self.key_filename, data=key)]
