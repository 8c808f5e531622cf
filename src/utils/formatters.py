from typing import Dict
from models.statutory import StatutoryBreakdown
from utils.money import Numeric, round_money
from config.settings import CURRENCY_SYMBOL

def format_currency(amount: Numeric, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format currency amount in Malaysian (en-MY) style, e.g. RM 1,234.50

    The symbol is followed by a non-breaking space.
    """
    amount = round_money(amount)
    if amount.is_nan():
        return f"{symbol}\u00a0NaN"
    sign = "-" if amount < 0 else ""
    if amount.is_infinite():
        return f"{sign}{symbol}\u00a0\u221e"
    return f"{sign}{symbol}\u00a0{abs(amount):,.2f}"

def format_breakdown(breakdown: StatutoryBreakdown) -> Dict[str, str]:
    """Format every amount of a breakdown for display"""
    return {name: format_currency(value) for name, value in breakdown.as_dict().items()}
