import re
from datetime import date

# Fixed-width, ASCII-only. "\d" would also accept non-ASCII digits.
_ISO_DATE_PATTERN = re.compile(r"([0-9]{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])")


def is_valid_date(value: object) -> bool:
    """Checks that a value is a YYYY-MM-DD string naming a real calendar date.

    The string must match the fixed-width pattern exactly (four-digit year,
    two-digit month and day, hyphen separators) and the day must exist in
    that month, so ``1999-02-29`` and ``1999-06-31`` are rejected while
    ``2020-02-29`` is accepted.

    Args:
        value (object): The raw value taken from a request payload.

    Returns:
        bool: True if the value is a valid date string.
    """
    if not isinstance(value, str):
        return False

    match = _ISO_DATE_PATTERN.fullmatch(value)
    if not match:
        return False

    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
