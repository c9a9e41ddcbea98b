"""Conversions between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

import argparse
import enum
import sys

from .bmi import parse_number
from .primes import parse_positive

_INVALID_NUMBER = "invalid input. pls enter a valid number."


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return (celsius * 9.0 / 5.0) + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32.0) * 5.0 / 9.0


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert kelvin to degrees Celsius."""
    return kelvin - 273.15


def celsius_to_kelvin(celsius: float) -> float:
    """Convert degrees Celsius to kelvin."""
    return celsius + 273.15


class Conversion(enum.IntEnum):
    """A menu entry of the converter."""

    CELSIUS_TO_FAHRENHEIT = 1
    FAHRENHEIT_TO_CELSIUS = 2
    KELVIN_TO_CELSIUS = 3
    CELSIUS_TO_KELVIN = 4

    @property
    def prompt(self) -> str:
        """The request for a temperature shown for this conversion."""
        return _DETAILS[self][0]

    @property
    def invalid_message(self) -> str:
        """The message shown when the temperature cannot be read."""
        return _DETAILS[self][1]

    def convert(self, value: float) -> float:
        """Apply the conversion to a temperature."""
        return _DETAILS[self][2](value)

    def describe(self, value: float) -> str:
        """Return the report line for converting value."""
        return _DETAILS[self][3].format(value, self.convert(value))


_DETAILS = {
    Conversion.CELSIUS_TO_FAHRENHEIT: (
        "Enter temperature in celcsuis:",
        "invalid choice. pls enter 1 or 2.",
        celsius_to_fahrenheit,
        "{:.2f}°C is {:.2f}°F",
    ),
    Conversion.FAHRENHEIT_TO_CELSIUS: (
        "Enter temperature in fahrenheit:",
        _INVALID_NUMBER,
        fahrenheit_to_celsius,
        "{:.2f}°C is {:.2f}°F",
    ),
    Conversion.KELVIN_TO_CELSIUS: (
        "Enter the temperature in Kelvin",
        _INVALID_NUMBER,
        kelvin_to_celsius,
        "{:.2f}°K is {:.2f}°C",
    ),
    Conversion.CELSIUS_TO_KELVIN: (
        "Enter the temperature in Celsius",
        _INVALID_NUMBER,
        celsius_to_kelvin,
        "{:.2f}°K is {:.2f}°C",
    ),
}


def parse_choice(text: str) -> Conversion:
    """Parse a menu number into a Conversion."""
    try:
        number = parse_positive(text)
    except ValueError:
        raise ValueError("invalid choice. pls enter 1 or 2.") from None
    try:
        return Conversion(number)
    except ValueError:
        raise ValueError("invalid choice. Please select 1 , 2 or 3.") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for a conversion and a temperature on standard input."""
    parser = argparse.ArgumentParser(
        prog="temperature", description="Convert a temperature between scales."
    )
    parser.parse_args(argv)

    print(" Temperature Converter")
    print(" 1: Celsius to Fahrenheit")
    print(" 2: Fahrenheit to Celsius  ")
    print(" 3: Kelvin to Celsius  ")
    print(" 4: Celsius to Kelvin   ")
    print(" please select an option (1 , 2 , 3, 4) :")
    try:
        conversion = parse_choice(sys.stdin.readline())
    except ValueError as exc:
        print(exc)
        return 0

    print(conversion.prompt)
    try:
        value = parse_number(sys.stdin.readline())
    except ValueError:
        print(conversion.invalid_message)
        return 0
    print(conversion.describe(value))
    return 0