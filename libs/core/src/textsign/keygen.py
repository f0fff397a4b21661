from __future__ import annotations

import logging
import os
from typing import List, Optional, Union

from .errors import CryptoFailure
from .interfaces import KeyArtifact, RandomSource, Scheme
from .loader import adapter_for

log = logging.getLogger(__name__)


class KeyGenerator:
    """Produce fresh key material for a scheme.

    The random source is injected so tests can substitute a seeded generator;
    production code uses ``os.urandom``.
    """

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self._random_source: RandomSource = random_source or os.urandom

    def _draw(self, n: int) -> bytes:
        data = self._random_source(n)
        if len(data) != n:
            raise CryptoFailure(f"random source returned {len(data)} bytes, expected {n}")
        return bytes(data)

    def generate(self, scheme: Union[str, Scheme]) -> List[KeyArtifact]:
        adapter = adapter_for(scheme)
        artifacts = adapter.keygen(self._draw)
        log.debug("generated %d key artifact(s) for %s", len(artifacts), adapter.name)
        return artifacts
