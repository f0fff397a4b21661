
from .interfaces import KeyArtifact, Scheme, SignatureScheme, TextSigner, TextVerifier
from .registry import registry
from .errors import (
    CryptoFailure,
    InputNotFound,
    KeyFormatError,
    KeyLoadError,
    SignatureDecodeError,
    SignatureFormatError,
    TextSignError,
    UnsupportedScheme,
)
from .facade import generate_keys, sign, verify
from .keygen import KeyGenerator
from .loader import adapter_for, load_adapters, missing_schemes

__all__ = [
    "KeyArtifact",
    "Scheme",
    "SignatureScheme",
    "TextSigner",
    "TextVerifier",
    "registry",
    "CryptoFailure",
    "InputNotFound",
    "KeyFormatError",
    "KeyLoadError",
    "SignatureDecodeError",
    "SignatureFormatError",
    "TextSignError",
    "UnsupportedScheme",
    "generate_keys",
    "sign",
    "verify",
    "KeyGenerator",
    "adapter_for",
    "load_adapters",
    "missing_schemes",
]
