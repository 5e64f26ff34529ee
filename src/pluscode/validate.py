"""
Code grammar checks.

A code is valid when it follows the Open Location Code grammar, short when
it is valid and has fewer than eight characters before the separator, and
full when it is valid, not short, and its first two characters fall inside
the legal latitude and longitude ranges.

None of these functions raise; malformed input returns False.
"""

from .alphabet import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
    strip_code,
)


def is_valid(code: str) -> bool:
    """
    Determine if a code is valid.

    All characters must come from the code alphabet, apart from exactly one
    separator in an even position no later than the eighth, and an optional
    even-length run of padding that ends at the separator. Surrounding
    whitespace is ignored.

    Args:
        code: Candidate code string

    Returns:
        True if the code follows the grammar
    """
    if not isinstance(code, str):
        return False
    code = code.strip()
    if not code:
        return False
    if len(code) == 1:
        return False

    separator = code.find(SEPARATOR)
    if separator == -1 or code.count(SEPARATOR) > 1:
        return False
    if separator > SEPARATOR_POSITION or separator % 2 == 1:
        return False

    padding = code.find(PADDING_CHARACTER)
    if padding != -1:
        if padding == 0:
            return False
        padding_end = code.rfind(PADDING_CHARACTER) + 1
        run = code[padding:padding_end]
        # Only one group, of even length, leaving at least one pair
        if run.count(PADDING_CHARACTER) != len(run):
            return False
        if len(run) % 2 == 1 or len(run) > SEPARATOR_POSITION - 2:
            return False
        if padding_end != separator or not code.endswith(SEPARATOR):
            return False

    # A single character after the separator is not legal
    if len(code) - separator - 1 == 1:
        return False

    return all(digit_value(char) != -1 for char in strip_code(code))


def is_short(code: str) -> bool:
    """
    Determine if a code is a valid short code.

    A short code has had characters removed from its front and needs a
    reference location to be recovered.
    """
    if not is_valid(code):
        return False
    return code.strip().find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: str) -> bool:
    """
    Determine if a code is a valid full code.

    Besides being valid and not short, the first latitude character must
    decode below 90 degrees and the first longitude character below 180.
    """
    if not is_valid(code) or is_short(code):
        return False
    code = code.strip()

    if digit_value(code[0]) * ENCODING_BASE >= LATITUDE_MAX * 2:
        return False
    if len(code) > 1:
        if digit_value(code[1]) * ENCODING_BASE >= LONGITUDE_MAX * 2:
            return False
    return True
