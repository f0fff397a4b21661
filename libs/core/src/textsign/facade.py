from __future__ import annotations

"""Single entry point for signing, verification and key generation.

Each call loads its own key object and input buffer and drops them on return;
nothing is cached between calls.
"""

import logging
from typing import List, Optional, Union

from .codec import decode_signature, encode_signature
from .interfaces import KeyArtifact, PathLike, RandomSource, Scheme
from .inputs import read_input
from .keygen import KeyGenerator
from .loader import adapter_for

log = logging.getLogger(__name__)


def sign(input_path: PathLike, key_path: PathLike, scheme: Union[str, Scheme]) -> str:
    data = read_input(input_path)
    adapter = adapter_for(scheme)
    signer = adapter.load_signer(key_path)
    raw = signer.sign(data)
    log.debug("signed %d input bytes with %s", len(data), adapter.name)
    return encode_signature(raw)


def verify(
    input_path: PathLike,
    key_path: PathLike,
    signature_text: str,
    scheme: Union[str, Scheme],
) -> bool:
    signature = decode_signature(signature_text)
    data = read_input(input_path)
    adapter = adapter_for(scheme)
    verifier = adapter.load_verifier(key_path)
    ok = verifier.verify(data, signature)
    log.debug("verified %d input bytes with %s: %s", len(data), adapter.name, ok)
    return ok


def generate_keys(
    scheme: Union[str, Scheme],
    random_source: Optional[RandomSource] = None,
) -> List[KeyArtifact]:
    return KeyGenerator(random_source).generate(scheme)
