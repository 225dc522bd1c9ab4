from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_NUMERALS: list[tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def roman_to_int(text: str) -> int:
    """
    Parse a Roman numeral (case-insensitive).

    Subtractive pairs are handled by undoing the previous digit when a larger
    one follows it, so no lookahead is needed. Anything outside IVXLCDM is
    rejected instead of silently counting as zero.
    """
    numeral = text.strip().upper()
    if not numeral:
        raise ValueError("empty Roman numeral")

    total = 0
    prev = 0
    for char in numeral:
        value = _VALUES.get(char)
        if value is None:
            raise ValueError(f"invalid Roman numeral {text!r}: unexpected {char!r}")
        if value > prev:
            total += value - 2 * prev
        else:
            total += value
        prev = value
    return total


def int_to_roman(value: int) -> str:
    if value < 1 or value > 3999:
        raise ValueError(f"cannot express {value} as a Roman numeral")
    remaining = value
    out: list[str] = []
    for n, sym in _NUMERALS:
        while remaining >= n:
            out.append(sym)
            remaining -= n
    return "".join(out)
