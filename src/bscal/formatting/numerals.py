"""ASCII <-> Devanagari digit transliteration. Non-digit characters pass through."""
from __future__ import annotations

ASCII_DIGITS = "0123456789"
LOCAL_DIGITS = "०१२३४५६७८९"

_TO_LOCAL = str.maketrans(ASCII_DIGITS, LOCAL_DIGITS)
_TO_ASCII = str.maketrans(LOCAL_DIGITS, ASCII_DIGITS)


def to_local_numerals(s: object) -> str:
    return str(s).translate(_TO_LOCAL)


def to_ascii_numerals(s: str) -> str:
    return s.translate(_TO_ASCII)


def apply_numerals(s: str, numerals: str) -> str:
    if numerals == "ascii":
        return s
    if numerals == "local":
        return to_local_numerals(s)
    raise ValueError("numerals must be 'ascii' or 'local'")
