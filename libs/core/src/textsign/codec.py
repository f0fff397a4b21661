from __future__ import annotations

"""Key file and signature text codecs.

Key files are raw bytes with no envelope. Signatures travel as URL-safe
base64 without padding, decoded strictly so a mangled token never reaches a
verifier.
"""

import base64
import binascii
import logging
import re
from pathlib import Path

from .errors import KeyLoadError, SignatureDecodeError, TextSignError
from .interfaces import PathLike

log = logging.getLogger(__name__)

_URL_SAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def read_key_bytes(path: PathLike) -> bytes:
    key_path = Path(path)
    try:
        data = key_path.read_bytes()
    except OSError as exc:
        raise KeyLoadError(f"cannot read key file {key_path}: {exc.strerror or exc}") from exc
    log.debug("loaded %d key bytes from %s", len(data), key_path)
    return data


def write_key_bytes(path: PathLike, data: bytes) -> Path:
    key_path = Path(path)
    try:
        key_path.write_bytes(data)
    except OSError as exc:
        raise TextSignError(f"cannot write key file {key_path}: {exc.strerror or exc}") from exc
    return key_path


def encode_signature(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_signature(text: str) -> bytes:
    """Decode a URL-safe, unpadded base64 token.

    Padding characters, characters outside the URL-safe alphabet, impossible
    lengths and non-zero trailing bits are all rejected.
    """
    token = text
    if not _URL_SAFE_ALPHABET.fullmatch(token):
        raise SignatureDecodeError("signature is not valid URL-safe base64 without padding")
    if len(token) % 4 == 1:
        raise SignatureDecodeError(f"signature has an invalid base64 length ({len(token)})")
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise SignatureDecodeError(f"signature is not valid URL-safe base64: {exc}") from exc
    if encode_signature(raw) != token:
        raise SignatureDecodeError("signature has non-canonical trailing bits")
    return raw
