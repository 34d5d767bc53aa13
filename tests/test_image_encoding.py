"""Tests for chunked base64 encoding of uploads."""
from __future__ import annotations

import base64
import os

import pytest

from kicks_match.utils.image_encoding import (
    DEFAULT_CHUNK_SIZE,
    encode_base64_chunked,
    iter_base64_chunks,
)


class TestChunkedBase64:
    """Chunking must never change the encoded output."""

    @pytest.mark.parametrize("size", [0, 1, 2, 5, 6, 7, 19])
    def test_small_chunks_match_one_pass(self, size):
        data = os.urandom(size)
        expected = base64.b64encode(data).decode("ascii")
        assert encode_base64_chunked(data, chunk_size=6) == expected

    @pytest.mark.parametrize(
        "size",
        [DEFAULT_CHUNK_SIZE - 1, DEFAULT_CHUNK_SIZE, DEFAULT_CHUNK_SIZE * 2 + 1],
    )
    def test_default_chunk_boundary_matches_one_pass(self, size):
        data = os.urandom(size)
        assert encode_base64_chunked(data) == base64.b64encode(data).decode("ascii")

    def test_only_last_chunk_is_padded(self):
        chunks = list(iter_base64_chunks(b"abcdefgh", chunk_size=3))
        assert chunks == ["YWJj", "ZGVm", "Z2g="]

    @pytest.mark.parametrize("chunk_size", [0, -3, 4, 100])
    def test_rejects_chunk_size_not_multiple_of_three(self, chunk_size):
        with pytest.raises(ValueError):
            encode_base64_chunked(b"abc", chunk_size=chunk_size)
