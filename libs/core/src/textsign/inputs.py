from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import InputNotFound
from .interfaces import PathLike

STDIN_TOKEN = "-"


@contextmanager
def open_input(source: PathLike) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``source``; ``-`` means standard input.

    Standard input is left open for the caller's process. File handles are
    always closed, including when the body raises.
    """
    if str(source) == STDIN_TOKEN:
        yield sys.stdin.buffer
        return
    path = Path(source)
    if not path.is_file():
        raise InputNotFound(f"input file does not exist: {path}")
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputNotFound(f"input file is not readable: {path} ({exc.strerror or exc})") from exc
    with handle:
        yield handle


def read_input(source: PathLike) -> bytes:
    with open_input(source) as reader:
        try:
            return reader.read()
        except OSError as exc:
            raise InputNotFound(f"failed to read input {source}: {exc.strerror or exc}") from exc
