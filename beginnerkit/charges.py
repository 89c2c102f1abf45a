"""Parcel charges, simple-interest arithmetic and unit conversions."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Currency",
    "parcel_charge",
    "principal",
    "rate",
    "time_period",
    "interest",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "convert_currency",
    "ounces_to_pounds",
    "grams_to_pounds",
]

BASE_PARCEL_CHARGE = 32.50
PER_KG_CHARGE = 10.50
FREE_WEIGHT_KG = 2

OUNCE_IN_POUNDS = 0.0625
GRAM_IN_POUNDS = 0.00220462


class Currency(Enum):
    """Currencies reachable from US dollars, valued at units per dollar."""

    EURO = 0.87
    JPY = 111.09
    RMB = 6.82


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def parcel_charge(weight: float) -> float:
    """Return the charge for a parcel: a flat rate up to 2 kg, then per kilogram."""
    if weight <= FREE_WEIGHT_KG:
        return BASE_PARCEL_CHARGE
    return (weight - FREE_WEIGHT_KG) * PER_KG_CHARGE + BASE_PARCEL_CHARGE


def principal(amount: int, rate: int, time: int) -> int:
    """Return 100 * amount / rate * time in integer arithmetic."""
    return _trunc_div(100 * amount, rate) * time


def rate(amount: int, principal: int, time: int) -> int:
    """Return 100 * amount / principal * time in integer arithmetic."""
    return _trunc_div(100 * amount, principal) * time


def time_period(amount: int, principal: int, rate: int) -> int:
    """Return 100 * amount / principal * rate in integer arithmetic."""
    return _trunc_div(100 * amount, principal) * rate


def interest(principal: int, rate: int, time: int) -> float:
    """Return principal * time * rate / 100, divided as integers."""
    return float(_trunc_div(principal * time * rate, 100))


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """Convert Fahrenheit to Celsius, truncating toward zero."""
    return int((fahrenheit - 32) * (5.0 / 9.0))


def celsius_to_fahrenheit(celsius: int) -> int:
    """Convert Celsius to Fahrenheit, truncating toward zero."""
    return int((9.0 / 5.0) * celsius + 32)


def convert_currency(usd: float, currency: Currency | str) -> float:
    """Convert an amount in US dollars to the given currency."""
    if isinstance(currency, str):
        try:
            currency = Currency[currency.upper()]
        except KeyError:
            raise ValueError(f"unknown currency: {currency!r}") from None
    return usd * currency.value


def ounces_to_pounds(ounces: float) -> float:
    """Convert ounces to pounds."""
    return ounces * OUNCE_IN_POUNDS


def grams_to_pounds(grams: float) -> float:
    """Convert grams to pounds."""
    return grams * GRAM_IN_POUNDS