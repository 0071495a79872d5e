import pytest

from fakerfactory.attributes import car_brand, color, gender
from fakerfactory.core import seed
from fakerfactory.data import CAR_BRANDS, COLORS, GENDERS


def test_one_color_is_chinese_and_repeatable():
    seed(11)
    first = color("zh_CN")
    seed(11)
    assert color("zh_CN") == first
    assert first in COLORS["zh_CN"]


def test_random_color_comes_from_either_language():
    seed(11)
    seen = {color("zh_CN", "en_US") for _ in range(200)}
    assert seen <= set(COLORS["zh_CN"]) | set(COLORS["en_US"])
    assert seen & set(COLORS["zh_CN"])
    assert seen & set(COLORS["en_US"])


def test_color_unknown_language_gives_empty_string():
    assert color("fr_FR") == ""


def test_color_without_language_raises():
    with pytest.raises(IndexError):
        color()


@pytest.mark.parametrize("lang", ["zh_CN", "en_US"])
def test_car_brand_in_list(lang):
    seed(3)
    for _ in range(50):
        assert car_brand(lang) in CAR_BRANDS[lang]


@pytest.mark.parametrize("lang", ["zh_CN", "en_US"])
def test_gender_in_list(lang):
    seed(5)
    values = {gender(lang) for _ in range(100)}
    assert values == set(GENDERS[lang])


def test_gender_without_language_raises():
    with pytest.raises(IndexError):
        gender()