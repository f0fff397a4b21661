from __future__ import annotations

import random

import pytest

from textsign import CryptoFailure, KeyGenerator, Scheme


def test_seeded_generator_is_reproducible():
    a = KeyGenerator(random.Random(42).randbytes).generate(Scheme.BLAKE3)
    b = KeyGenerator(random.Random(42).randbytes).generate(Scheme.BLAKE3)
    assert a[0].data == b[0].data


def test_generator_draws_from_injected_source():
    calls: list[int] = []

    def source(n: int) -> bytes:
        calls.append(n)
        return b"\xaa" * n

    (secret,) = KeyGenerator(source).generate("blake3")
    assert calls == [32]
    assert secret.data == b"\xaa" * 32


def test_short_random_source_is_crypto_failure():
    with pytest.raises(CryptoFailure):
        KeyGenerator(lambda n: b"\x00" * (n - 1)).generate("ed25519")


def test_key_artifact_repr_hides_key_bytes():
    (secret,) = KeyGenerator(lambda n: b"\xee" * n).generate("blake3")
    assert "\\xee" not in repr(secret)
    assert "size=32" in repr(secret)
