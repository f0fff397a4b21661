from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Protocol, Union

from .errors import UnsupportedScheme

"""Scheme selector and capability interfaces used by adapters.

Adapters implement these Protocols and register themselves into the global
registry. The facade and CLI interact only with these interfaces, never with
the hashing or signature libraries directly.
"""

PathLike = Union[str, Path]
RandomSource = Callable[[int], bytes]


class Scheme(str, Enum):
    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: Union[str, "Scheme"]) -> "Scheme":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise UnsupportedScheme(f"invalid sign format type: {value!r} (expected one of: {choices})") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeyArtifact:
    """One generated key buffer plus the file name the CLI stores it under."""
    role: str
    filename: str
    data: bytes

    def __repr__(self) -> str:
        return f"KeyArtifact(role={self.role!r}, filename={self.filename!r}, size={len(self.data)})"


class TextSigner(Protocol):
    def sign(self, data: bytes) -> bytes: ...


class TextVerifier(Protocol):
    def verify(self, data: bytes, signature: bytes) -> bool: ...


class SignatureScheme(Protocol):
    """Per-scheme adapter contract."""
    name: str
    signature_size: int
    def load_signer(self, path: PathLike) -> TextSigner: ...
    def load_verifier(self, path: PathLike) -> TextVerifier: ...
    def keygen(self, random_source: RandomSource) -> List[KeyArtifact]: ...
