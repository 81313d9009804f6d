"""String-to-number conversion used by the typed getters."""

from __future__ import annotations

from .values import Invalid, _Invalid

_DIGITS = "0123456789"

LEGACY_FAILURE = -1


def _split_sign(text: str) -> tuple[bool, str]:
    if text.startswith("-"):
        return True, text[1:]
    return False, text


def parse_int(text: str) -> int | _Invalid:
    """Leading-digit integer parse.

    ``"42"`` → 42, ``"-7"`` → -7, ``"12abc"`` → 12, ``"abc"`` → Invalid.
    """
    negative, rest = _split_sign(text)
    if not rest or rest[0] not in _DIGITS:
        return Invalid
    end = 0
    while end < len(rest) and rest[end] in _DIGITS:
        end += 1
    result = int(rest[:end])
    return -result if negative else result


def parse_float(text: str) -> float | _Invalid:
    """Leading-digit decimal parse with at most one dot.

    ``"66.99"`` → 66.99, ``".5"`` → 0.5, ``"1.2.3"`` → 1.2, ``"x"`` → Invalid.
    """
    negative, rest = _split_sign(text)
    if not rest or (rest[0] not in _DIGITS and rest[0] != "."):
        return Invalid
    int_part = ""
    frac_part = ""
    seen_dot = False
    for ch in rest:
        if ch == ".":
            if seen_dot:
                break
            seen_dot = True
        elif ch in _DIGITS:
            if seen_dot:
                frac_part += ch
            else:
                int_part += ch
        else:
            break
    result = float(f"{int_part or '0'}.{frac_part or '0'}")
    return -result if negative else result


# ---------------------------------------------------------------------------
# Legacy converters (-1 on failure)
# ---------------------------------------------------------------------------

def strtoint(text: str | None) -> int:
    if text is None:
        return LEGACY_FAILURE
    result = parse_int(text)
    return LEGACY_FAILURE if result is Invalid else result


def strtofloat(text: str | None) -> float:
    if text is None:
        return float(LEGACY_FAILURE)
    result = parse_float(text)
    return float(LEGACY_FAILURE) if result is Invalid else result
