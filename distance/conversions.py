"""Distance conversion functions between miles and kilometers."""

from types import MappingProxyType

ONE_MILE_IN_KILOMETERS = 1.609344


def miles_to_kilometers(miles: float) -> float:
    return miles * ONE_MILE_IN_KILOMETERS


def kilometers_to_miles(kilometers: float) -> float:
    return kilometers / ONE_MILE_IN_KILOMETERS


CONVERSIONS = MappingProxyType({
    "miles_to_kilometers": miles_to_kilometers,
    "kilometers_to_miles": kilometers_to_miles,
})
