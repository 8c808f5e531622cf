from decimal import InvalidOperation
from utils.money import Numeric, to_decimal

def validate_salary(amount: Numeric) -> bool:
    """Validate salary amount is a finite, non-negative number"""
    try:
        amount = to_decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        return False
    return amount.is_finite() and amount >= 0

def validate_month(month: int) -> bool:
    """Validate month number"""
    return 1 <= month <= 12

def validate_unpaid_leave_days(days: Numeric, days_in_month: int) -> bool:
    """Validate unpaid leave fits within the month"""
    if not validate_salary(days):
        return False
    return to_decimal(days) <= days_in_month
