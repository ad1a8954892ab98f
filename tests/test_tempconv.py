import pytest

from exemplar.tempconv import (
    ABSOLUTE_ZERO_C,
    BOILING_C,
    FREEZING_C,
    Celsius,
    Fahrenheit,
    c_to_f,
    describe_boiling,
    f_to_c,
    main,
)


def test_example_one_arithmetic():
    assert format(BOILING_C - FREEZING_C, "g") == "100"
    boiling_f = c_to_f(BOILING_C)
    assert format(boiling_f - c_to_f(FREEZING_C), "g") == "180"


def test_arithmetic_keeps_scale():
    difference = BOILING_C - FREEZING_C
    assert isinstance(difference, Celsius)
    assert str(difference) == "100°C"
    doubled = c_to_f(BOILING_C) * 2
    assert isinstance(doubled, Fahrenheit)
    assert str(doubled) == "424°F"


def test_mixed_scales_raise():
    with pytest.raises(TypeError):
        c_to_f(BOILING_C) - FREEZING_C


def test_example_two_printing():
    c = f_to_c(212.0)
    assert str(c) == "100°C"
    assert f"{c}" == "100°C"
    assert "%s" % c == "100°C"
    assert format(c, "g") == "100"
    assert float(c) == 100


def test_absolute_zero_string():
    assert str(Celsius(-273.15)) == "-273.15°C"
    assert float(ABSOLUTE_ZERO_C) == -273.15
    assert c_to_f(ABSOLUTE_ZERO_C) == pytest.approx(-459.67)


def test_ftoc_values():
    assert f"{Fahrenheit(32.0)} = {f_to_c(32.0)}" == "32°F = 0°C"
    assert f"{Fahrenheit(212.0)} = {f_to_c(212.0)}" == "212°F = 100°C"


def test_large_value_uses_exponent():
    assert str(Celsius(1e6)) == "1e+06°C"


def test_describe_boiling():
    assert describe_boiling() == "boiling point = 212°F or 100°C"


def test_round_trip():
    for value in (-40.0, 0.0, 37.0, 100.0, 451.0):
        assert f_to_c(c_to_f(value)) == pytest.approx(value)


def test_main_converts(capsys):
    assert main(["-40"]) == 0
    assert capsys.readouterr().out == "-40°F = -40°C, -40°C = -40°F\n"


def test_main_boiling(capsys):
    assert main(["212"]) == 0
    assert capsys.readouterr().out.startswith("212°F = 100°C, ")


def test_main_rejects_bad_number(capsys):
    assert main(["abc"]) == 1
    captured = capsys.readouterr()
    assert captured.err == 'cf: strconv.ParseFloat: parsing "abc": invalid syntax\n'