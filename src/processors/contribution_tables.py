"""
SOCSO (PERKESO Jenis Pertama) and EIS (SIP) contribution schedules.

Both schedules are wage-banded; amounts are looked up from the capped
monthly wage and returned already rounded to cents.
"""
import calendar
from decimal import Decimal
from models.statutory import ContributionPair
from utils.money import Numeric, to_decimal, round_money, ceil_whole
from config.settings import SOCSO_WAGE_CEILING, EIS_WAGE_CEILING

# (wage up to, employer, employee), ascending, upper bound inclusive
SOCSO_FIXED_BRACKETS = [
    (Decimal('30'), Decimal('0.40'), Decimal('0.10')),
    (Decimal('50'), Decimal('0.70'), Decimal('0.20')),
    (Decimal('70'), Decimal('1.10'), Decimal('0.30')),
    (Decimal('100'), Decimal('1.50'), Decimal('0.40')),
    (Decimal('140'), Decimal('2.10'), Decimal('0.60')),
    (Decimal('200'), Decimal('2.95'), Decimal('0.85')),
    (Decimal('300'), Decimal('4.35'), Decimal('1.25')),
]

SOCSO_BAND_WIDTH = Decimal('100')
SOCSO_EMPLOYEE_STEP = Decimal('0.50')
SOCSO_EMPLOYER_STEP_ODD = Decimal('1.80')
SOCSO_EMPLOYER_STEP_EVEN = Decimal('1.70')

EIS_FLAT_WAGE = Decimal('1000')
EIS_FLAT_AMOUNT = Decimal('1.90')
EIS_BAND_WIDTH = Decimal('100')
EIS_BAND_STEP = Decimal('0.20')

ZERO = Decimal('0')

def days_in_month(month: int, year: int) -> int:
    """Number of calendar days in the month.

    Months outside 1-12 roll into the neighbouring years, so month 13 is
    January of the following year and month 0 is December of the previous one.
    Years are taken as-is on the proleptic Gregorian calendar: year 0 is a
    leap year, two-digit years are not shifted into the 1900s.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return calendar.monthrange(year, month)[1]

def social_security_contribution(salary: Numeric) -> ContributionPair:
    """SOCSO employer/employee contribution for a monthly wage"""
    salary = to_decimal(salary)
    if salary.is_nan():
        return ContributionPair(employer=salary, employee=salary)
    if salary <= 0:
        return ContributionPair(employer=ZERO, employee=ZERO)

    wage = min(salary, SOCSO_WAGE_CEILING)

    for limit, employer, employee in SOCSO_FIXED_BRACKETS:
        if wage <= limit:
            return ContributionPair(employer=employer, employee=employee)

    # Above the last fixed band the published table grows by 100-unit bands:
    # employee +0.50 per band, employer alternating +1.80 (odd band floor)
    # and +1.70 (even band floor).
    floor, employer, employee = SOCSO_FIXED_BRACKETS[-1]
    while floor < wage and floor < SOCSO_WAGE_CEILING:
        employee += SOCSO_EMPLOYEE_STEP
        if (floor / SOCSO_BAND_WIDTH) % 2 == 1:
            employer += SOCSO_EMPLOYER_STEP_ODD
        else:
            employer += SOCSO_EMPLOYER_STEP_EVEN
        floor += SOCSO_BAND_WIDTH

    return ContributionPair(employer=round_money(employer), employee=round_money(employee))

def insurance_contribution(salary: Numeric) -> Decimal:
    """EIS contribution for a monthly wage (same amount for employer and employee)"""
    salary = to_decimal(salary)
    if salary.is_nan():
        return salary
    if salary <= 0:
        return ZERO

    wage = min(salary, EIS_WAGE_CEILING)

    if wage <= EIS_FLAT_WAGE:
        return EIS_FLAT_AMOUNT

    # 1000.01 already counts as the first band above 1000
    bands = ceil_whole((wage - EIS_FLAT_WAGE) / EIS_BAND_WIDTH)
    return round_money(EIS_FLAT_AMOUNT + bands * EIS_BAND_STEP)
