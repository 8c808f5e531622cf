import logging
from decimal import Decimal
from models.statutory import StatutoryBreakdown
from processors.contribution_tables import (
    days_in_month as resolve_days_in_month,
    social_security_contribution,
    insurance_contribution,
)
from utils.money import Numeric, to_decimal, round_money, ceil_whole, non_trapping_context
from config.settings import (
    EPF_EMPLOYEE_RATE,
    EPF_EMPLOYER_RATE,
    EPF_EMPLOYER_REDUCED_RATE,
    EPF_EMPLOYER_RATE_THRESHOLD,
    DEFAULT_DAYS_IN_MONTH,
)

logger = logging.getLogger(__name__)

def calculate_statutory(
    basic: Numeric,
    allowance: Numeric = 0,
    bonus: Numeric = 0,
    overtime: Numeric = 0,
    unpaid_leave_days: Numeric = 0,
    other_deductions: Numeric = 0,
    manual_pcb: Numeric = 0,
    days_in_month: int = DEFAULT_DAYS_IN_MONTH,
) -> StatutoryBreakdown:
    """Calculate EPF, SOCSO, EIS and net salary for one pay period.

    PCB (monthly tax deduction) is not computed here; the caller supplies it
    and it is passed through unchanged. Inputs are not range-checked, see
    utils.validators for caller-side checks. Degenerate input never raises:
    a zero-day month gives an infinite leave deduction and NaN/Infinity
    propagate through to the affected amounts.
    """
    with non_trapping_context():
        basic = to_decimal(basic)
        unpaid_leave_days = to_decimal(unpaid_leave_days)
        other_deductions = to_decimal(other_deductions)
        pcb = to_decimal(manual_pcb)

        if unpaid_leave_days > 0:
            unpaid_leave_deduction = basic / to_decimal(days_in_month) * unpaid_leave_days
        else:
            unpaid_leave_deduction = Decimal('0')

        # Kept unrounded for the contribution lookups below
        gross_salary = (
            basic
            + to_decimal(allowance)
            + to_decimal(bonus)
            + to_decimal(overtime)
            - unpaid_leave_deduction
        )

        # EPF is rounded up to whole ringgit, unlike everything else (2 decimals).
        # This is the statutory rounding rule, not an oversight.
        epf_employee = ceil_whole(gross_salary * EPF_EMPLOYEE_RATE)
        if gross_salary <= EPF_EMPLOYER_RATE_THRESHOLD:
            epf_employer = ceil_whole(gross_salary * EPF_EMPLOYER_RATE)
        else:
            epf_employer = ceil_whole(gross_salary * EPF_EMPLOYER_REDUCED_RATE)

        socso = social_security_contribution(gross_salary)
        eis = insurance_contribution(gross_salary)

        net_salary = round_money(
            gross_salary - epf_employee - socso.employee - eis - other_deductions - pcb
        )

        breakdown = StatutoryBreakdown(
            gross_salary=round_money(gross_salary),
            unpaid_leave_deduction=round_money(unpaid_leave_deduction),
            epf_employee=epf_employee,
            epf_employer=epf_employer,
            socso_employee=socso.employee,
            socso_employer=socso.employer,
            eis_employee=eis,
            eis_employer=eis,
            pcb=pcb,
            net_salary=net_salary,
        )
    logger.debug(
        "Statutory breakdown: gross=%s epf=%s/%s socso=%s/%s eis=%s pcb=%s net=%s",
        breakdown.gross_salary, epf_employee, epf_employer,
        socso.employee, socso.employer, eis, pcb, net_salary,
    )
    return breakdown

def calculate_statutory_for_month(year: int, month: int, basic: Numeric, **kwargs) -> StatutoryBreakdown:
    """calculate_statutory with unpaid leave prorated over the actual month length"""
    return calculate_statutory(basic, days_in_month=resolve_days_in_month(month, year), **kwargs)
