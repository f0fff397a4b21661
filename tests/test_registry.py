from __future__ import annotations

import pytest

from textsign import Scheme, UnsupportedScheme, adapter_for, missing_schemes, registry
from textsign.registry import _Registry


def test_every_scheme_has_an_adapter():
    assert missing_schemes() == []
    items = registry.list()
    assert "blake3" in items
    assert "ed25519" in items


def test_adapter_signature_sizes():
    assert adapter_for(Scheme.BLAKE3).signature_size == 32
    assert adapter_for(Scheme.ED25519).signature_size == 64


def test_scheme_parse_is_case_insensitive():
    assert Scheme.parse("ED25519") is Scheme.ED25519
    assert Scheme.parse(" blake3 ") is Scheme.BLAKE3


def test_scheme_parse_rejects_unknown():
    with pytest.raises(UnsupportedScheme):
        Scheme.parse("sha256")


def test_unregistered_name_raises():
    reg = _Registry()

    @reg.register("demo")
    class Demo:
        pass

    assert reg.get("demo") is Demo
    assert reg.missing(["demo", "other"]) == ["other"]
    with pytest.raises(UnsupportedScheme):
        reg.get("other")
