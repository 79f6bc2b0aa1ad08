"""
Check digit for personal identity numbers.

A Luhn-style sum: digits in even positions (counting from zero on the left)
are doubled, two-digit products are folded into the sum of their digits, and
the check digit is whatever brings the total up to a multiple of 10.
"""


def compute_check_digit(digits: str) -> str:
    """
    Compute the check digit for the 9 digits YYMMDDNNN of a personal
    identity number. The input is not validated: it must contain only
    decimal digits
    """
    total = 0
    for i, c in enumerate(digits):
        n = int(c) * (2 if i % 2 == 0 else 1)
        # a product of 10 or more contributes 1 + its units digit
        total += n - 10 + 1 if n >= 10 else n
    return str((10 - total % 10) % 10)
