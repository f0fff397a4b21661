from __future__ import annotations

import base64
from pathlib import Path

import pytest

from textsign.codec import decode_signature, encode_signature, read_key_bytes, write_key_bytes
from textsign.errors import KeyLoadError, SignatureDecodeError


def test_encode_has_no_padding_and_is_url_safe():
    raw = bytes([0xFB, 0xFF, 0xBF, 0x00, 0x01])
    text = encode_signature(raw)
    assert "=" not in text
    assert "+" not in text and "/" not in text
    assert text == base64.urlsafe_b64encode(raw).decode().rstrip("=")
    assert decode_signature(text) == raw


def test_decode_rejects_padding():
    with pytest.raises(SignatureDecodeError):
        decode_signature("aGVsbG8=")


def test_decode_rejects_standard_alphabet():
    with pytest.raises(SignatureDecodeError):
        decode_signature("+/+/")


@pytest.mark.parametrize("token", ["a", "abcde", "not base64!"])
def test_decode_rejects_malformed_tokens(token: str):
    with pytest.raises(SignatureDecodeError):
        decode_signature(token)


def test_decode_rejects_non_canonical_trailing_bits():
    # "aGVsbG8" is canonical for b"hello"; "aGVsbG9" sets unused low bits.
    assert decode_signature("aGVsbG8") == b"hello"
    with pytest.raises(SignatureDecodeError):
        decode_signature("aGVsbG9")


def test_decode_empty_token_is_empty_bytes():
    assert decode_signature("") == b""


def test_read_key_bytes_missing_file(tmp_path: Path):
    with pytest.raises(KeyLoadError):
        read_key_bytes(tmp_path / "nope.key")


def test_read_key_bytes_directory(tmp_path: Path):
    with pytest.raises(KeyLoadError):
        read_key_bytes(tmp_path)


def test_write_then_read_key_bytes_is_byte_exact(tmp_path: Path):
    data = bytes(range(256))
    path = write_key_bytes(tmp_path / "k.bin", data)
    assert read_key_bytes(path) == data


@pytest.mark.parametrize("token", [" aGVsbG8", "aGVsbG8\n", "aGVs bG8"])
def test_decode_rejects_whitespace(token: str):
    with pytest.raises(SignatureDecodeError):
        decode_signature(token)
