"""Parsing "city,year,temperature" records with descriptive errors."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def _parse_u32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if text != text.strip() or "_" in text:
        raise ValueError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ValueError("invalid float literal") from None


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


class ParseClimateErrorKind(Enum):
    """Why a climate record could not be parsed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_CITY = "no city name"
    PARSE_INT = "error parsing year"
    PARSE_FLOAT = "error parsing temperature"


class ParseClimateError(ValueError):
    """A climate record was malformed; the cause is chained when there is one."""

    def __init__(self, kind: ParseClimateErrorKind, cause: Exception | None = None) -> None:
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


def parse_climate(text: str) -> Climate:
    """Parse "city,year,temperature"; raise ParseClimateError otherwise."""
    if not text:
        raise ParseClimateError(ParseClimateErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateErrorKind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateErrorKind.NO_CITY)
    try:
        year = _parse_u32(year_text)
    except ValueError as exc:
        raise ParseClimateError(ParseClimateErrorKind.PARSE_INT, exc) from exc
    try:
        temp = _parse_float(temp_text)
    except ValueError as exc:
        raise ParseClimateError(ParseClimateErrorKind.PARSE_FLOAT, exc) from exc
    return Climate(city=city, year=year, temp=temp)