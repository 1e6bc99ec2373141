"""Tests for the bitwise AND/OR/XOR transform plugin."""

import pytest
from bytetransform.errors import InvalidArgumentError, LengthMismatchError, NullParameterError
from bytetransform.plugins.bitwise import BitwiseMode, BitwiseTransformer


class TestBitwiseTransformer:
    """Test cases for BitwiseTransformer."""

    def setup_method(self):
        """Setup test fixtures."""
        self.left = bytearray([0x0F, 0xF0, 0xAA, 0x00])
        self.right = bytes([0xFF, 0x0F, 0x55, 0x01])

    def test_describe(self):
        desc = BitwiseTransformer(self.right, BitwiseMode.XOR).describe()
        assert isinstance(desc, str)
        assert "XOR" in desc

    def test_and_scenario(self):
        t = BitwiseTransformer(bytes([0xFF, 0x0F]), BitwiseMode.AND)
        assert t.transform(bytearray([0x0F, 0xF0]), False) == bytearray([0x0F, 0x00])

    def test_or(self):
        t = BitwiseTransformer(self.right, BitwiseMode.OR)
        assert t.transform(self.left, False) == bytearray([0xFF, 0xFF, 0xFF, 0x01])

    def test_xor(self):
        t = BitwiseTransformer(self.right, BitwiseMode.XOR)
        assert t.transform(self.left, False) == bytearray([0xF0, 0xFF, 0xFF, 0x01])

    def test_xor_with_itself_is_zero(self):
        t = BitwiseTransformer(bytes(self.left), BitwiseMode.XOR)
        assert t.transform(self.left, False) == bytearray(len(self.left))

    def test_copy_mode_leaves_input_untouched(self):
        original = bytearray(self.left)
        t = BitwiseTransformer(self.right, BitwiseMode.AND)
        out = t.transform(self.left, False)
        assert out is not self.left
        assert self.left == original

    def test_in_place_writes_into_input(self):
        t = BitwiseTransformer(self.right, BitwiseMode.AND)
        out = t.transform(self.left, True)
        assert out is self.left
        assert self.left == bytearray([0x0F, 0x00, 0x00, 0x00])

    def test_accepts_immutable_input_in_copy_mode(self):
        t = BitwiseTransformer(self.right, BitwiseMode.OR)
        out = t.transform(bytes(self.left), False)
        assert isinstance(out, bytearray)
        assert out == bytearray([0xFF, 0xFF, 0xFF, 0x01])

    def test_in_place_requires_bytearray(self):
        t = BitwiseTransformer(self.right, BitwiseMode.OR)
        with pytest.raises(InvalidArgumentError):
            t.transform(bytes(self.left), True)

    def test_length_mismatch_does_not_touch_buffer(self):
        t = BitwiseTransformer(b"\xff\xff", BitwiseMode.AND)
        buf = bytearray(b"\x01\x02\x03")
        with pytest.raises(LengthMismatchError) as exc:
            t.transform(buf, True)
        assert buf == bytearray(b"\x01\x02\x03")
        assert exc.value.expected == 2
        assert exc.value.actual == 3
        # also a ValueError for plain Python callers
        assert isinstance(exc.value, ValueError)

    def test_empty_buffers(self):
        t = BitwiseTransformer(b"", BitwiseMode.XOR)
        assert t.transform(bytearray(), True) == bytearray()

    def test_mode_accepts_value_string(self):
        t = BitwiseTransformer("ff00", "and")
        assert t.mode is BitwiseMode.AND
        assert t.second == b"\xff\x00"

    def test_second_buffer_is_copied(self):
        second = bytearray(b"\x0f")
        t = BitwiseTransformer(second, BitwiseMode.OR)
        second[0] = 0xF0
        assert t.transform(bytearray(b"\x00"), False) == bytearray(b"\x0f")

    def test_null_parameters(self):
        with pytest.raises(NullParameterError):
            BitwiseTransformer(None, BitwiseMode.AND)
        with pytest.raises(NullParameterError):
            BitwiseTransformer(b"\x00", None)

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError):
            BitwiseTransformer(b"\x00", "nand")

    def test_instance_is_immutable(self):
        t = BitwiseTransformer(self.right, BitwiseMode.AND)
        with pytest.raises(AttributeError):
            t.mode = BitwiseMode.OR
