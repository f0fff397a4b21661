"""BLAKE3 keyed-hash adapter.

Importing this package registers the ``blake3`` scheme.
"""

from .blake3_adapter import KEY_SIZE, Blake3Scheme, Blake3Signer

__all__ = ["KEY_SIZE", "Blake3Scheme", "Blake3Signer"]
