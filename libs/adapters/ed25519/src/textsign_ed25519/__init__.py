"""Ed25519 adapter backed by ``cryptography``.

Importing this package registers the ``ed25519`` scheme.
"""

from .ed25519_adapter import (
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
    Ed25519Scheme,
    Ed25519Signer,
    Ed25519Verifier,
    is_valid_point,
)

__all__ = [
    "PRIVATE_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "Ed25519Scheme",
    "Ed25519Signer",
    "Ed25519Verifier",
    "is_valid_point",
]
