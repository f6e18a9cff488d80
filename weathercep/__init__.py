"""HTTP service reporting the current temperature for a Brazilian CEP."""

__version__ = "0.1.0"