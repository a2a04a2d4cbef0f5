"""
bscal.formatting.formatter
--------------------------
String rendering of BS dates. Everything except format_dual is a pure
function of (year, month, day) and the static name tables; numerals are
transliterated as a last pass over the finished string.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from ..core.types import DualFormatOptions
from .names import AD_LABEL, BS_LABEL, month_name
from .numerals import apply_numerals

# Alternation order is longest-first per letter, so MMMM wins over MM at the
# same position. One regex pass means substituted month names are never
# rescanned for tokens.
_TOKEN_RE = re.compile(r"YYYY|YY|MMMM|MMM|MM|M|DD|D")

_TOKENS: Dict[str, Callable[[int, int, int], str]] = {
    "YYYY": lambda y, m, d: f"{y:04d}",
    "YY": lambda y, m, d: f"{y % 100:02d}",
    "MMMM": lambda y, m, d: month_name(m),
    "MMM": lambda y, m, d: month_name(m)[:3],
    "MM": lambda y, m, d: f"{m:02d}",
    "M": lambda y, m, d: str(m),
    "DD": lambda y, m, d: f"{d:02d}",
    "D": lambda y, m, d: str(d),
}


def format_short(year: int, month: int, day: int, *, numerals: str = "ascii") -> str:
    """YYYY-MM-DD, zero padded."""
    return apply_numerals(f"{year:04d}-{month:02d}-{day:02d}", numerals)


def format_long(year: int, month: int, day: int, *, numerals: str = "ascii") -> str:
    """'15 Baisakh 2080'."""
    return apply_numerals(f"{day} {month_name(month)} {year}", numerals)


def format_local(year: int, month: int, day: int, *, numerals: str = "ascii") -> str:
    """'15 बैशाख 2080', or '१५ बैशाख २०८०' with numerals='local'."""
    return apply_numerals(f"{day} {month_name(month, local=True)} {year}", numerals)


def format_custom(year: int, month: int, day: int, pattern: str, *, numerals: str = "ascii") -> str:
    """
    Substitute YYYY, YY, MMMM, MMM, MM, M, DD, D in pattern.

    >>> format_custom(2080, 1, 5, "MMM DD, YY")
    'Bai 05, 80'
    """
    out = _TOKEN_RE.sub(lambda mo: _TOKENS[mo.group(0)](year, month, day), pattern)
    return apply_numerals(out, numerals)


_STYLES = {
    "short": format_short,
    "long": format_long,
    "local": format_local,
}


def format_bs(year: int, month: int, day: int, style: str = "short", *, numerals: str = "ascii") -> str:
    if style not in _STYLES:
        raise ValueError(f"Unknown style '{style}'. Available: {sorted(_STYLES)}")
    return _STYLES[style](year, month, day, numerals=numerals)


def format_dual(eng, year: int, month: int, day: int, options: Optional[DualFormatOptions] = None) -> str:
    """
    '2081-10-24 BS (2025-02-06 AD)'. eng converts the date (and rejects
    invalid ones); the AD half is always ISO-8601 in ASCII digits.
    """
    opts = options or DualFormatOptions()
    ad = eng.to_ad(year, month, day)
    bs_str = format_bs(year, month, day, opts.style, numerals=opts.numerals)
    local = opts.numerals == "local"
    sep = opts.separator
    return f"{bs_str}{sep}{BS_LABEL[local]}{sep}({ad.isoformat()}{sep}{AD_LABEL[local]})"
