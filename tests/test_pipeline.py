#!/usr/bin/env python3
"""
Tests for the combined BWT + MTF pipeline and block framing.
"""

import random

import pytest

from blocksort import mtf, bwt
from blocksort.bwt import TransformedBlock
from blocksort.errors import (
    IndexOutOfRangeError,
    InvalidLengthError,
    MissingInputError,
)
from blocksort.pipeline import (
    compress,
    compress_block,
    decompress,
    decompress_block,
    pack_block,
    unpack_block,
)


ABRA_FRAME = b"\x00\x00\x00\x03ARD!RCAAAABB"


class TestFraming:
    """Test origin header + symbols framing."""

    def test_pack(self):
        assert pack_block(TransformedBlock(3, b"ARD!RCAAAABB")) == ABRA_FRAME

    def test_unpack(self):
        assert unpack_block(ABRA_FRAME) == TransformedBlock(3, b"ARD!RCAAAABB")

    def test_header_is_big_endian(self):
        data = bytes(300)
        frame = pack_block(TransformedBlock(258, data))
        assert frame[:4] == b"\x00\x00\x01\x02"

    def test_empty_block(self):
        assert pack_block(TransformedBlock(None, b"")) == b""
        assert unpack_block(b"") == TransformedBlock(None, b"")

    def test_truncated_header(self):
        with pytest.raises(InvalidLengthError):
            unpack_block(b"\x00\x00\x01")

    def test_origin_outside_block(self):
        with pytest.raises(IndexOutOfRangeError):
            unpack_block(b"\x00\x00\x00\x05AB")
        with pytest.raises(IndexOutOfRangeError):
            unpack_block(b"\x00\x00\x00\x00")

    def test_pack_rejects_bad_origin(self):
        with pytest.raises(IndexOutOfRangeError):
            pack_block(TransformedBlock(2, b"AB"))

    def test_pack_rejects_missing_origin(self):
        with pytest.raises(MissingInputError):
            pack_block(TransformedBlock(None, b"AB"))
        with pytest.raises(MissingInputError):
            pack_block(None)


class TestBlockPipeline:
    """Test compress_block / decompress_block."""

    def test_components(self):
        """Forward pipeline is transform followed by encode."""
        block = compress_block(b"ABRACADABRA!")
        transformed = bwt.transform(b"ABRACADABRA!")
        assert block.origin == transformed.origin
        assert block.data == mtf.encode(transformed.data)

    def test_decode_recovers_transform(self):
        """Decoding the ranks gives back the transformed block."""
        block = compress_block(b"mississippi")
        assert TransformedBlock(block.origin, mtf.decode(block.data)) == bwt.transform(b"mississippi")

    def test_round_trip(self):
        for data in [b"A", b"AAAAAA", b"ABRACADABRA!", bytes(range(256))]:
            assert decompress_block(compress_block(data)) == data

    def test_empty(self):
        block = compress_block(b"")
        assert block == TransformedBlock(None, b"")
        assert decompress_block(block) == b""

    def test_length_checked(self):
        with pytest.raises(InvalidLengthError):
            decompress_block(compress_block(b"banana"), length=7)

    def test_missing_block(self):
        with pytest.raises(MissingInputError):
            decompress_block(None)


class TestCompress:
    """Test the framed pipeline."""

    def test_matches_piped_commands(self):
        """compress == MTF-encode of the framed BWT output."""
        assert compress(b"ABRACADABRA!") == mtf.encode(ABRA_FRAME)

    def test_round_trip(self):
        rng = random.Random(3)
        for size in [0, 1, 2, 10, 1000, 10000]:
            data = bytes(rng.choice(b"abcde ") for _ in range(size))
            assert decompress(compress(data)) == data

    def test_round_trip_all_strategies(self):
        data = b"to be or not to be, that is the question"
        for strategy in ['comparison', 'doubling', 'divsufsort']:
            assert decompress(compress(data, strategy=strategy)) == data

    def test_empty(self):
        assert compress(b"") == b""
        assert decompress(b"") == b""

    def test_repetitive_input_gives_zero_ranks(self):
        payload = compress(b"abc" * 200)
        assert payload.count(0) > len(payload) // 2

    def test_verbose(self, capsys):
        compress(b"ABRACADABRA!", verbose=True)
        captured = capsys.readouterr()
        assert "Transformed 12 bytes" in captured.out

        decompress(compress(b"ABRACADABRA!"), verbose=True)
        captured = capsys.readouterr()
        assert "Restored 12 bytes" in captured.out

    def test_corrupt_payload(self):
        with pytest.raises(InvalidLengthError):
            decompress(b"\x00\x00")
