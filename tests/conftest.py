from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

for rel in (
    Path("libs/core/src"),
    Path("libs/adapters/blake3/src"),
    Path("libs/adapters/ed25519/src"),
    Path("apps/cli/src"),
):
    candidate_str = str(ROOT / rel)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

HELLO = b"hello world!"


@pytest.fixture
def blake3_key_path(tmp_path: Path) -> Path:
    path = tmp_path / "blake3.txt"
    path.write_bytes(b"\x01" * 32)
    return path


@pytest.fixture
def message_path(tmp_path: Path) -> Path:
    path = tmp_path / "message.txt"
    path.write_bytes(HELLO)
    return path


@pytest.fixture
def seeded_random():
    return random.Random(1234).randbytes


@pytest.fixture
def ed25519_keys(tmp_path: Path, seeded_random):
    from textsign import generate_keys

    sk, pk = generate_keys("ed25519", random_source=seeded_random)
    sk_path = tmp_path / sk.filename
    pk_path = tmp_path / pk.filename
    sk_path.write_bytes(sk.data)
    pk_path.write_bytes(pk.data)
    return sk_path, pk_path


@pytest.fixture
def off_curve_key() -> bytes:
    """32 bytes whose y has no matching x on edwards25519."""
    p = 2 ** 255 - 19
    d = (-121665 * pow(121666, p - 2, p)) % p
    for y in range(2, 1000):
        u = (y * y - 1) % p
        v = (d * y * y + 1) % p
        x2 = u * pow(v, p - 2, p) % p
        if pow(x2, (p - 1) // 2, p) == p - 1:
            return y.to_bytes(32, "little")
    raise AssertionError("no off-curve y below 1000")
