"""As-you-type filtering of numeric text fields.

``sanitize`` is a pure function from (current text, edit) to the text the
field should show. The caller echoes the returned string back into the field,
so sanitizing an already-sanitized string must return it unchanged.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

ASCII_DIGITS = frozenset("0123456789")
OUNCE_CEILING = 15
# Well below CPython's int/str conversion limit
MAX_INTEGER_DIGITS = 18

# Integer literal as the entry platforms parse it: optional sign, ASCII digits
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

EditRange = Tuple[int, int]


@dataclass(frozen=True)
class SanitizeOptions:
    """Per-field filtering switches.

    Attributes:
        digits_only: Drop every character that is not an ASCII digit
        clamp_ounces_0_to_15: Replace any integer above 15 with "15"
    """
    digits_only: bool = False
    clamp_ounces_0_to_15: bool = False


OUNCES_FIELD = SanitizeOptions(digits_only=True, clamp_ounces_0_to_15=True)
WHOLE_NUMBER_FIELD = SanitizeOptions(digits_only=True)


def apply_edit(current_text: str, edit_range: EditRange, replacement: str) -> Optional[str]:
    """Replace ``length`` characters at ``start`` with ``replacement``.

    Returns None when the range does not fit inside ``current_text``; the edit
    is then refused.
    """
    start, length = edit_range
    if start < 0 or length < 0 or start + length > len(current_text):
        return None
    return current_text[:start] + replacement + current_text[start + length:]


def parse_integer(text: str) -> Optional[int]:
    """Strict integer parse; "1_6", " 16" or "16.0" are not integers here.

    Literals with more than ``MAX_INTEGER_DIGITS`` significant digits are not
    converted either; use ``exceeds_ounce_ceiling`` to compare those.
    """
    if not _INTEGER_LITERAL.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > MAX_INTEGER_DIGITS:
        return None
    return int(text)


def exceeds_ounce_ceiling(text: str) -> bool:
    """True when ``text`` is an integer literal above 15.

    Decided from the count of significant digits, so only one- or two-digit
    values are ever passed to ``int()``.
    """
    if not _INTEGER_LITERAL.fullmatch(text) or text.startswith("-"):
        return False
    digits = text.lstrip("+").lstrip("0")
    return len(digits) > 2 or (digits != "" and int(digits) > OUNCE_CEILING)


def sanitize(
    current_text: str,
    edit_range: EditRange,
    replacement: str,
    options: SanitizeOptions = SanitizeOptions(),
) -> str:
    """Return the accepted field text after applying an edit.

    Steps: apply the edit, strip non-digits when ``digits_only``, then clamp
    integers above 15 to "15" when ``clamp_ounces_0_to_15``. Clamping never
    carries into pounds. Leading zeros are kept; they are dropped at parse time.

    Example:
        sanitize("", (0, 0), "20", OUNCES_FIELD)  # -> "15"
    """
    candidate = apply_edit(current_text, edit_range, replacement)
    if candidate is None:
        return current_text

    if options.digits_only:
        candidate = "".join(ch for ch in candidate if ch in ASCII_DIGITS)

    if options.clamp_ounces_0_to_15 and exceeds_ounce_ceiling(candidate):
        candidate = str(OUNCE_CEILING)

    return candidate


def sanitize_text(text: str, options: SanitizeOptions = SanitizeOptions()) -> str:
    """Sanitize a whole string, e.g. a pasted or restored value."""
    return sanitize(text, (0, 0), "", options)
