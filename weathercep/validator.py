"""Validation and formatting of Brazilian postal codes (CEP)."""

import re

_CEP_PATTERN = re.compile(r"[0-9]{5}-?[0-9]{3}")


def is_valid_cep(cep: str) -> bool:
    """Return True if *cep* is eight digits, optionally hyphenated as 12345-678.

    Surrounding whitespace is ignored.
    """
    return _CEP_PATTERN.fullmatch(cep.strip()) is not None


def normalize_cep(cep: str) -> str:
    """Remove every hyphen and surrounding whitespace from *cep*."""
    return cep.replace("-", "").strip()


def format_cep(cep: str) -> str:
    """Return *cep* as ``12345-678``, or unchanged if it does not hold eight characters."""
    normalized = normalize_cep(cep)
    if len(normalized) == 8:
        return f"{normalized[:5]}-{normalized[5:]}"
    return cep