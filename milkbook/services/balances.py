# milkbook/services/balances.py

from decimal import Decimal


def unpaid(total_milk_amount: Decimal, total_paid_amount: Decimal) -> Decimal:
    """
    Outstanding amount for a period. Negative when the customer overpaid;
    that credit is meaningful and is never floored at zero.
    """
    return total_milk_amount - total_paid_amount
