from contextlib import contextmanager
from decimal import Decimal, ROUND_HALF_UP, ROUND_CEILING, DivisionByZero, InvalidOperation, localcontext
from typing import Union

Numeric = Union[int, float, str, Decimal]

CENTS = Decimal('0.01')

def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal (floats go through str to avoid binary noise)"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)

@contextmanager
def non_trapping_context():
    """Decimal context where x/0 gives +-Infinity and undefined results give NaN instead of raising"""
    with localcontext() as ctx:
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        yield ctx

def round_money(value: Numeric) -> Decimal:
    """Round to 2 decimal places, half-up; NaN and Infinity pass through"""
    value = to_decimal(value)
    if not value.is_finite():
        return value
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)

def ceil_whole(value: Numeric) -> Decimal:
    """Round up to the next whole currency unit; NaN and Infinity pass through"""
    value = to_decimal(value)
    if not value.is_finite():
        return value
    return value.to_integral_value(rounding=ROUND_CEILING)
