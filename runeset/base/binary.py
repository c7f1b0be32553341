"""
runeset.base.binary - binary utilities

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""


def ceildiv(num, den):
    """Integer division, rounding up."""
    return -(-num // den)


def reverse_bits(byte):
    """Reverse the bit order of a single byte value."""
    return (
        ((byte & 0x01) << 7)
        | ((byte & 0x02) << 5)
        | ((byte & 0x04) << 3)
        | ((byte & 0x08) << 1)
        | ((byte & 0x10) >> 1)
        | ((byte & 0x20) >> 3)
        | ((byte & 0x40) >> 5)
        | ((byte & 0x80) >> 7)
    )


# lookup table, byte -> reversed byte
_REVERSED = bytes(reverse_bits(_b) for _b in range(256))
_INVERTED = bytes(0xff ^ _b for _b in range(256))


def reverse_by_byte(byteseq):
    """Reverse bits in every byte of a bytes sequence."""
    return bytes(byteseq).translate(_REVERSED)


def invert_by_byte(byteseq):
    """Complement every byte of a bytes sequence."""
    return bytes(byteseq).translate(_INVERTED)


def byte_to_bits(byte, width=8):
    """
    Convert a byte value to a tuple of bits.
    Least significant bit comes first, i.e. bit j is element j.
    """
    return tuple(bool((byte >> _j) & 1) for _j in range(width))


def bits_to_byte(bits):
    """Convert a sequence of bits, least significant first, to a byte value."""
    return sum(1 << _j for _j, _bit in enumerate(bits) if _bit)
