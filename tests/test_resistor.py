import math

import pytest

from ohmimetro.resistor import (
    ADC_RESOLUTION,
    COLOR_NAMES,
    E24,
    KNOWN_RESISTANCE,
    ColorCode,
    color_code,
    nearest_e24,
    resistance_from_adc,
)


def _encoded(code):
    return (code.first * 10 + code.second) * 10 ** code.multiplier


@pytest.mark.parametrize("digit", range(10))
def test_names_follow_palette(digit):
    code = ColorCode(first=digit, second=digit, multiplier=digit, value=0)
    assert code.names() == (COLOR_NAMES[digit],) * 3


def test_names_palette_order():
    code = ColorCode(first=0, second=9, multiplier=5, value=0)
    assert code.names() == ("preto", "branco", "verde")


@pytest.mark.parametrize("entry", E24)
def test_e24_entries_map_to_themselves(entry):
    assert nearest_e24(entry) == entry


def test_nearest_picks_closest_entry():
    assert nearest_e24(50) == 51
    assert nearest_e24(95) == 91
    assert nearest_e24(96) == 100


def test_nearest_tie_prefers_first():
    assert nearest_e24(10.5) == 10


def test_nearest_below_range_is_first_entry():
    assert nearest_e24(-3) == E24[0]
    assert nearest_e24(0) == E24[0]


def test_color_code_4700():
    code = color_code(4700)
    assert code.value == 4700
    assert code.names() == ("amarelo", "violeta", "vermelho")
    assert _encoded(code) == code.value


def test_color_code_rounds_to_hundred():
    code = color_code(KNOWN_RESISTANCE)
    assert code.names() == ("marrom", "preto", "laranja")
    assert _encoded(code) == code.value


def test_color_code_small_value():
    code = color_code(5)
    assert code.names() == ("marrom", "preto", "preto")
    assert code.value == E24[0]


@pytest.mark.parametrize("entry", E24)
@pytest.mark.parametrize("exponent", range(0, 7))
def test_commercial_values_round_trip(entry, exponent):
    resistance = int(entry) * 10 ** exponent
    code = color_code(resistance)
    assert code.value == resistance
    assert _encoded(code) == resistance


@pytest.mark.parametrize("resistance", [123.0, 777.7, 3300.4, 99999.0, 12.0])
def test_value_is_commercial_and_encoded(resistance):
    code = color_code(resistance)
    assert _encoded(code) == code.value
    mantissa = code.value / 10 ** (len(str(code.value)) - 2)
    assert mantissa in E24


def test_non_finite_resistance_rejected():
    with pytest.raises(ValueError):
        color_code(math.inf)
    with pytest.raises(ValueError):
        color_code(math.nan)


def test_huge_multiplier_has_no_colour():
    code = color_code(10 ** 12)
    with pytest.raises(ValueError):
        code.names()


def test_names_reject_negative_band():
    with pytest.raises(ValueError):
        ColorCode(first=-1, second=0, multiplier=0, value=0).names()


def test_half_scale_reading_equals_known_resistance():
    assert resistance_from_adc(2024, 9810, 4048) == pytest.approx(9810)


def test_defaults_are_source_constants():
    half = ADC_RESOLUTION / 2
    assert resistance_from_adc(half) == pytest.approx(KNOWN_RESISTANCE)


def test_zero_reading_is_short():
    assert resistance_from_adc(0) == 0


def test_resistance_grows_with_reading():
    values = [resistance_from_adc(r) for r in (100, 1000, 2000, 3000, 4000)]
    assert values == sorted(values)


def test_full_scale_reading_rejected():
    with pytest.raises(ValueError):
        resistance_from_adc(ADC_RESOLUTION)