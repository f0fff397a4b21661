from __future__ import annotations

import importlib
import importlib.util
import logging
from typing import Any, List, Union

from .interfaces import Scheme, SignatureScheme
from .registry import registry

log = logging.getLogger(__name__)

ADAPTER_MODULES = ("textsign_blake3", "textsign_ed25519")

_LOADED = False


def load_adapters() -> None:
    """Import the adapter packages so they register their schemes."""
    global _LOADED
    if _LOADED:
        return
    for mod in ADAPTER_MODULES:
        if importlib.util.find_spec(mod) is None:
            log.warning("adapter package %s is not installed", mod)
            continue
        try:
            importlib.import_module(mod)
        except ImportError as exc:
            log.warning("adapter import error in %s: %s", mod, exc)
    _LOADED = True


def adapter_for(scheme: Union[str, Scheme]) -> SignatureScheme:
    load_adapters()
    selected = Scheme.parse(scheme)
    adapter_cls: Any = registry.get(selected.value)
    log.debug("dispatching to %s adapter", selected.value)
    return adapter_cls()


def missing_schemes() -> List[str]:
    load_adapters()
    return registry.missing(s.value for s in Scheme)
