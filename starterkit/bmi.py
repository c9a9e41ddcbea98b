"""Body mass index calculation and classification."""

from __future__ import annotations

import argparse
import sys


def parse_number(text: str) -> float:
    """Parse a decimal number, ignoring surrounding whitespace."""
    stripped = text.strip()
    if "_" in stripped:
        raise ValueError(f"not a number: {text!r}")
    return float(stripped)


def calculate_bmi(weight: float, height: float) -> float:
    """Return weight (kg) divided by the square of height (m)."""
    if height == 0.0:
        raise ValueError("Height cannot be zero")
    return weight / (height * height)


def classify_bmi(bmi: float) -> str:
    """Return the category name for a BMI value."""
    if bmi < 18.5:
        return "underweight"
    if 18.5 <= bmi <= 24.9:
        return "normal weight"
    if 25.0 <= bmi <= 29.9:
        return "overweight"
    return "Obesity"


def main(argv: list[str] | None = None) -> int:
    """Ask for weight and height on standard input and report the BMI."""
    parser = argparse.ArgumentParser(
        prog="bmi", description="Calculate and classify a body mass index."
    )
    parser.parse_args(argv)

    print("BMI calculator")
    print("Pls enter your weight in kilogram (kg):")
    try:
        weight = parse_number(sys.stdin.readline())
    except ValueError:
        print("invalid input for weight. pls enter a valid input.")
        return 0

    print("pls enter your height in meters (m):")
    try:
        height = parse_number(sys.stdin.readline())
    except ValueError:
        print("invalid input for height. pls enter a valid input.")
        return 0

    try:
        bmi = calculate_bmi(weight, height)
    except ValueError as exc:
        print(exc)
        return 0

    print(f"your BMI is: {bmi:.2f}")
    print(f"BMI Category: {classify_bmi(bmi)}")
    return 0