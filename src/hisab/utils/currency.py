"""Taka formatting in the bn-BD style."""

from decimal import Decimal, ROUND_HALF_UP

TAKA = "৳"
TO_BENGALI_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")


def group_digits(digits: str) -> str:
    """Group an integer digit string the South-Asian way: 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_taka(amount: Decimal, bengali_digits: bool = True, signed: bool = False) -> str:
    """Format an amount as taka, e.g. '৳১,২৩,৪৫৬.০০'.

    Args:
        amount: Amount to format
        bengali_digits: Render digits as ০-৯ (default) instead of 0-9
        signed: Prefix positive amounts with '+'

    Returns:
        Formatted string; negative amounts get a leading '-'
    """
    value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value < 0:
        sign = "-"
    elif signed and value > 0:
        sign = "+"
    else:
        sign = ""

    integer, fraction = f"{abs(value):.2f}".split(".")
    text = f"{TAKA}{group_digits(integer)}.{fraction}"
    if bengali_digits:
        text = text.translate(TO_BENGALI_DIGITS)
    return sign + text
