import string
import struct

import pytest

from fakerfactory import core, data


def test_number_in_range_and_reproducible():
    core.seed(11)
    first = core.number(50, 23456)
    core.seed(11)
    assert core.number(50, 23456) == first
    assert 50 <= first <= 23456


def test_different_seeds_give_different_streams():
    core.seed(11)
    first = core.lexify("?" * 30)
    core.seed(12)
    assert core.lexify("?" * 30) != first


def test_time_seed_still_gives_valid_numbers():
    core.seed(0)
    assert 10 <= core.number(10, 999999) <= 999999


@pytest.mark.parametrize(
    "func, low, high",
    [
        (core.uint8, 0, 255),
        (core.uint16, 0, 65535),
        (core.uint32, 0, 4294967295),
        (core.uint64, 0, 2**63 - 2),
        (core.int8, -128, 127),
        (core.int16, -32768, 32767),
        (core.int32, -(2**31), 2**31 - 1),
        (core.int64, -(2**63), -1),
    ],
)
def test_integer_generators_stay_in_range(func, low, high):
    core.seed(11)
    for _ in range(200):
        assert low <= func() <= high


def test_integer_generators_are_reproducible():
    core.seed(11)
    values = [core.uint8(), core.int32(), core.uint64(), core.int64()]
    core.seed(11)
    assert [core.uint8(), core.int32(), core.uint64(), core.int64()] == values


def test_float32_is_single_precision():
    core.seed(11)
    value = core.float32()
    assert struct.unpack("<f", struct.pack("<f", value))[0] == value
    assert 0 < value <= 3.4028234663852886e38


def test_float64_in_range():
    core.seed(11)
    value = core.float64()
    assert 0 < value <= 1.7976931348623157e308


def test_numerify_phone_pattern():
    core.seed(11)
    for _ in range(100):
        result = core.numerify("###-###-####")
        assert len(result) == 12
        assert result[3] == "-" and result[7] == "-"
        digits = result.replace("-", "")
        assert len(digits) == 10
        assert set(digits) <= set("012345678")
        assert result[0] in "12345678"


def test_numerify_empty():
    assert core.numerify("") == ""


def test_numerify_replaces_leading_zero():
    core.seed(11)
    result = core.numerify("0ab")
    assert result[0] in "12345678"
    assert result[1:] == "ab"


def test_letter_is_lowercase():
    core.seed(11)
    assert core.letter() in string.ascii_lowercase


def test_lexify_five_letters():
    core.seed(11)
    result = core.lexify("?????")
    assert len(result) == 5
    assert set(result) <= set(string.ascii_lowercase)


def test_lexify_keeps_other_characters():
    core.seed(11)
    result = core.lexify("a?b?")
    assert result[0] == "a" and result[2] == "b"
    assert result[1] in string.ascii_lowercase and result[3] in string.ascii_lowercase


def test_shuffle_ints_is_permutation():
    core.seed(11)
    ints = [52, 854, 941, 74125, 8413, 777, 89416, 841657]
    result = core.shuffle_ints(ints)
    assert sorted(result) == sorted(ints)
    assert ints == [52, 854, 941, 74125, 8413, 777, 89416, 841657]


def test_shuffle_ints_reproducible():
    ints = [52, 854, 941, 74125, 8413, 777, 89416, 841657]
    core.seed(11)
    first = core.shuffle_ints(ints)
    core.seed(11)
    assert core.shuffle_ints(ints) == first


def test_shuffle_strings_is_permutation():
    core.seed(11)
    words = ["happy", "times", "for", "everyone", "have", "a", "good", "day"]
    result = core.shuffle_strings(words)
    assert sorted(result) == sorted(words)


def test_shuffle_empty():
    assert core.shuffle_strings([]) == []


def test_rand_string_picks_member():
    choices = ["-", ":"]
    core.seed(11)
    assert core.rand_string(choices) in choices


def test_rand_string_empty_raises():
    with pytest.raises(IndexError):
        core.rand_string([])


def test_rand_bool_single_choice():
    assert core.rand_bool([True]) is True


def test_rand_int_range_equal_bounds():
    assert core.rand_int_range(7, 7) == 7


def test_rand_int_range_reversed_raises():
    with pytest.raises(ValueError):
        core.rand_int_range(5, 1)


def test_rand_float_range_equal_bounds():
    assert core.rand_float_range(2.5, 2.5) == 2.5


def test_rand_float_range_bounds():
    core.seed(11)
    for _ in range(100):
        assert 1.0 <= core.rand_float_range(1.0, 2.0) < 2.0


def test_rand_value_known_list():
    core.seed(11)
    assert core.rand_value("color", "en_US") in data.DATA["color"]["en_US"]


def test_rand_value_unknown_gives_empty():
    assert core.rand_value("planet", "x") == ""
    assert core.rand_value("color", "fr_FR") == ""