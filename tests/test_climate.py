import pytest

from drillkit.lessons.climate import (
    Climate,
    ParseClimateError,
    ParseClimateErrorKind,
    parse_climate,
)


def _error(text):
    with pytest.raises(ParseClimateError) as info:
        parse_climate(text)
    return info.value


def test_empty():
    err = _error("")
    assert err.kind is ParseClimateErrorKind.EMPTY
    assert str(err) == "empty input"


def test_short():
    err = _error("Boston,1991")
    assert err.kind is ParseClimateErrorKind.BAD_LEN
    assert str(err) == "incorrect number of fields"


def test_long():
    err = _error("Paris,1920,17.2,extra")
    assert err.kind is ParseClimateErrorKind.BAD_LEN
    assert str(err) == "incorrect number of fields"


def test_no_city():
    err = _error(",1997,20.5")
    assert err.kind is ParseClimateErrorKind.NO_CITY
    assert str(err) == "no city name"


def test_parse_int_neg():
    err = _error("Barcelona,-25,22.3")
    assert err.kind is ParseClimateErrorKind.PARSE_INT
    assert str(err) == f"error parsing year: {err.cause}"
    assert str(err.cause) == "invalid digit found in string"


def test_parse_int_bad():
    err = _error("Beijing,foo,15.0")
    assert err.kind is ParseClimateErrorKind.PARSE_INT
    assert str(err) == f"error parsing year: {err.cause}"


def test_parse_float():
    err = _error("Manila,2001,bar")
    assert err.kind is ParseClimateErrorKind.PARSE_FLOAT
    assert str(err) == f"error parsing temperature: {err.cause}"
    assert str(err.cause) == "invalid float literal"


def test_parse_good():
    assert parse_climate("Munich,2015,23.1") == Climate(city="Munich", year=2015, temp=23.1)


def test_downcast():
    err = _error("São Paulo,-21,28.5")
    assert err.kind is ParseClimateErrorKind.PARSE_INT
    assert isinstance(err.__cause__, ValueError)
    assert err.__cause__ is err.cause


def test_year_too_large():
    err = _error("Oslo,4294967296,3.0")
    assert err.kind is ParseClimateErrorKind.PARSE_INT
    assert str(err.cause) == "number too large to fit in target type"


def test_empty_temperature():
    err = _error("Oslo,2000,")
    assert err.kind is ParseClimateErrorKind.PARSE_FLOAT
    assert str(err.cause) == "cannot parse float from empty string"


def test_temperature_with_whitespace_rejected():
    err = _error("Oslo,2000, 3.0")
    assert err.kind is ParseClimateErrorKind.PARSE_FLOAT


def test_hong_kong_record():
    assert parse_climate("Hong Kong,1999,25.7") == Climate("Hong Kong", 1999, 25.7)