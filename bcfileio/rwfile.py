"""Reading, padding, writing and deleting the files that get encrypted."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# Cipher blocks are two 32-bit words wide.
BLOCK_SIZE = 8
# Width of the native long used for the overwrite pattern.
_WORD_SIZE = 8


@dataclass
class Options:
    """Settings that steer how a file is processed and written."""

    remove: bool = False
    standardout: bool = False
    compression: bool = False
    type: int = 0
    origsize: int = 0
    securedelete: int = 0


def get_remain(size: int, divisor: int) -> int:
    """Return how many bytes take ``size`` past the next multiple of ``divisor``.

    A size that is already a multiple gets a whole extra ``divisor``.
    """
    return (size // divisor + 1) * divisor - size


def pad_input(data: bytes) -> bytes:
    """Pad ``data`` with zero bytes up to a whole number of cipher blocks.

    Empty input and input that is already block aligned come back unchanged.
    """
    size = len(data)
    if size >= BLOCK_SIZE:
        remain = get_remain(size, BLOCK_SIZE)
    else:
        remain = BLOCK_SIZE - size
    if remain < BLOCK_SIZE:
        return bytes(data) + bytes(remain)
    return bytes(data)


def attach_key(data: bytes, key: bytes) -> bytes:
    """Append the key bytes to the end of ``data``."""
    return bytes(data) + bytes(key)


def read_file(path: PathLike) -> bytes:
    """Return the whole contents of the file at ``path``."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise OSError(exc.errno, f"Unable to open file {os.fspath(path)}") from exc


def write_file(path: PathLike, data: bytes, options: Options, mode: int | None) -> None:
    """Write ``data`` to ``path``, or to standard output if the options say so.

    A file written to disk is given the permission bits ``mode`` when it is
    not ``None``.
    """
    if options.standardout:
        stream = sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return

    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise OSError(exc.errno, f"Unable to create file {os.fspath(path)}") from exc

    with handle:
        try:
            written = handle.write(data)
        except OSError as exc:
            raise OSError(
                exc.errno, f"Out of space while writing file {os.fspath(path)}"
            ) from exc
        if written != len(data):
            raise OSError(f"Out of space while writing file {os.fspath(path)}")

    if mode is not None:
        os.chmod(path, mode)


def _overwrite_passes(size: int) -> int:
    """Number of words written over a file of ``size`` bytes in one pass."""
    words = size // _WORD_SIZE + 1
    return len(range(0, words, _WORD_SIZE))


def delete_file(path: PathLike, options: Options) -> None:
    """Remove the file at ``path``.

    With ``options.securedelete`` above zero, the start of the file is first
    overwritten with random words that many times.
    """
    if options.securedelete > 0:
        size = os.stat(path).st_size
        count = _overwrite_passes(size)
        with open(path, "r+b") as handle:
            for _ in range(options.securedelete):
                handle.seek(0)
                for _ in range(count):
                    handle.write(os.urandom(_WORD_SIZE))
                handle.flush()

    try:
        os.unlink(path)
    except OSError as exc:
        raise OSError(exc.errno, f"Error deleting file {os.fspath(path)}") from exc