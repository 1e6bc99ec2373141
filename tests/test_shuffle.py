"""Tests for the shuffle transform plugin."""

import random

import pytest
from bytetransform.errors import InvalidArgumentError, NullParameterError
from bytetransform.plugins.shuffle import ShuffleTransformer


def test_shuffle_is_a_permutation():
    data = bytearray(range(64)) * 2
    out = ShuffleTransformer(random.Random(1234)).transform(data, False)
    assert len(out) == len(data)
    assert sorted(out) == sorted(data)


def test_same_seed_same_output():
    data = bytearray(b"The quick brown fox jumps over the lazy dog")
    a = ShuffleTransformer(random.Random(42)).transform(data, False)
    b = ShuffleTransformer(random.Random(42)).transform(data, False)
    assert a == b
    assert a != data


def test_fisher_yates_from_the_end():
    data = bytearray(range(10))
    rng = random.Random(7)
    expected = list(data)
    for i in range(len(expected) - 1, 0, -1):
        j = rng.randrange(i + 1)
        expected[i], expected[j] = expected[j], expected[i]

    out = ShuffleTransformer(random.Random(7)).transform(data, False)
    assert out == bytearray(expected)


def test_in_place_and_copy_modes():
    buf = bytearray(range(32))
    copied = ShuffleTransformer(random.Random(5)).transform(buf, False)
    assert copied is not buf
    assert buf == bytearray(range(32))

    same = ShuffleTransformer(random.Random(5)).transform(buf, True)
    assert same is buf
    assert buf == copied


def test_generator_is_advanced_between_calls():
    t = ShuffleTransformer(random.Random(99))
    data = bytearray(range(50))
    assert t.transform(data, False) != t.transform(data, False)


def test_trivial_buffers():
    t = ShuffleTransformer(random.Random(0))
    assert t.transform(bytearray(), False) == bytearray()
    assert t.transform(bytearray(b"\x01"), False) == bytearray(b"\x01")


def test_construction_checks():
    with pytest.raises(NullParameterError):
        ShuffleTransformer(None)
    with pytest.raises(InvalidArgumentError):
        ShuffleTransformer(object())


def test_from_params_seed():
    data = bytearray(range(20))
    a = ShuffleTransformer.from_params({"seed": 3}).transform(data, False)
    b = ShuffleTransformer(random.Random(3)).transform(data, False)
    assert a == b
    with pytest.raises(NullParameterError):
        ShuffleTransformer.from_params({})
