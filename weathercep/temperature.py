"""Conversion of Celsius temperatures to other scales."""


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit: F = C * 1.8 + 32."""
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin: K = C + 273."""
    return celsius + 273


def convert_temperatures(celsius: float) -> tuple[float, float, float]:
    """Return the temperature as a (celsius, fahrenheit, kelvin) tuple."""
    return celsius, celsius_to_fahrenheit(celsius), celsius_to_kelvin(celsius)