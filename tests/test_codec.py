"""
runeset test suite
binary format tests
"""

import unittest

from runeset import encode, decode, Runeset, Glyph, BytesLengthError
from .base import BaseTester


class TestCodec(BaseTester):
    """Test runeset binary format."""

    def test_encode_blank(self):
        assert encode(Runeset.blank()) == bytes(2048)

    def test_encode_layout(self):
        font = Runeset.blank()
        font.set_at(Glyph(range(1, 9)), 1)
        font.set_at(self.full, 255)
        data = encode(font)
        assert len(data) == 2048
        assert data[:8] == bytes(8)
        assert data[8:16] == bytes(range(1, 9))
        assert data[-8:] == b'\xff' * 8

    def test_decode_layout(self):
        data = bytes(range(256)) * 8
        font = decode(data)
        assert font.read_at(0).rows == tuple(range(8))
        assert font.read_at(1).rows == tuple(range(8, 16))
        assert font.read_at(32).rows == tuple(range(0, 8))

    def test_round_trip_runeset(self):
        font = self.patterned_runeset()
        assert decode(encode(font)) == font

    def test_round_trip_bytes(self):
        data = bytes((_i * 97 + 11) & 0xff for _i in range(2048))
        assert encode(decode(data)) == data
        data = bytes(range(256)) * 8
        assert encode(decode(data)) == data

    def test_decode_bytearray(self):
        data = bytearray(range(256)) * 8
        assert encode(decode(data)) == bytes(data)
        assert encode(decode(memoryview(bytes(data)))) == bytes(data)

    def test_length_guard(self):
        for length in (0, 1, 2047, 2049, 4096):
            with self.assertRaises(BytesLengthError) as cm:
                decode(bytes(length))
            assert cm.exception.length == length
            # also a ValueError
            assert isinstance(cm.exception, ValueError)


if __name__ == '__main__':
    unittest.main()
