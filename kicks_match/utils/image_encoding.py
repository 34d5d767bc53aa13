"""Base64 encoding of uploaded images.

Uploads are encoded piecewise so a large photo never has to be pushed
through a single encoder call. Every chunk except the last is a multiple
of 3 bytes long, which means no chunk produces ``=`` padding and the
concatenated output is byte-for-byte the same as a one-pass encoding.
"""
from __future__ import annotations

import base64
from typing import Iterator

DEFAULT_CHUNK_SIZE = 0x8000 * 3


def iter_base64_chunks(data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Yield base64 text for ``data`` one chunk at a time.

    Args:
        data: raw bytes to encode
        chunk_size: bytes per chunk, must be a positive multiple of 3

    Raises:
        ValueError: when ``chunk_size`` cannot keep the output contiguous
    """
    if chunk_size <= 0 or chunk_size % 3:
        raise ValueError(f"chunk_size must be a positive multiple of 3, got {chunk_size}")

    view = memoryview(data)
    for offset in range(0, len(view), chunk_size):
        yield base64.b64encode(view[offset : offset + chunk_size]).decode("ascii")


def encode_base64_chunked(data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Encode ``data`` to base64 text in bounded chunks."""
    return "".join(iter_base64_chunks(data, chunk_size))
