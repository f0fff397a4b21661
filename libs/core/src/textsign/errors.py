from __future__ import annotations

"""Typed failures raised by the signing core.

A signature that simply does not match is not an error: verifiers return
``False`` for it. Everything here means the call could not be carried out.
"""


class TextSignError(Exception):
    """Base class for every failure the core reports."""


class InputNotFound(TextSignError):
    pass


class KeyLoadError(TextSignError):
    pass


class KeyFormatError(TextSignError):
    pass


class SignatureDecodeError(TextSignError):
    pass


class SignatureFormatError(TextSignError):
    pass


class CryptoFailure(TextSignError):
    pass


class UnsupportedScheme(TextSignError, ValueError):
    pass
