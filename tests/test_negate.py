"""Tests for the bitwise NOT transform plugin."""

from bytetransform.plugins.negate import NegateTransformer


def test_negates_every_byte():
    out = NegateTransformer().transform(bytearray([0x00, 0xFF, 0x0F, 0xA5]), False)
    assert out == bytearray([0xFF, 0x00, 0xF0, 0x5A])


def test_double_negation_is_identity():
    data = bytearray(b"Hello, World!")
    t = NegateTransformer()
    assert t.transform(t.transform(data, False), False) == data


def test_in_place_and_copy_modes():
    t = NegateTransformer()
    buf = bytearray([0x01, 0x02])

    copied = t.transform(buf, False)
    assert copied is not buf
    assert buf == bytearray([0x01, 0x02])

    same = t.transform(buf, True)
    assert same is buf
    assert buf == bytearray([0xFE, 0xFD])


def test_empty_buffer():
    assert NegateTransformer().transform(bytearray(), True) == bytearray()
