from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Dict

@dataclass(frozen=True)
class ContributionPair:
    """Employer/employee split of a SOCSO contribution"""
    employer: Decimal
    employee: Decimal

@dataclass(frozen=True)
class StatutoryBreakdown:
    """Statutory deductions for one pay period"""
    gross_salary: Decimal
    unpaid_leave_deduction: Decimal
    epf_employee: Decimal
    epf_employer: Decimal
    socso_employee: Decimal
    socso_employer: Decimal
    eis_employee: Decimal
    eis_employer: Decimal
    pcb: Decimal
    net_salary: Decimal

    @property
    def total_employee_deductions(self) -> Decimal:
        """Statutory amounts withheld from the employee, PCB included"""
        return self.epf_employee + self.socso_employee + self.eis_employee + self.pcb

    @property
    def total_employer_contributions(self) -> Decimal:
        return self.epf_employer + self.socso_employer + self.eis_employer

    def as_dict(self) -> Dict[str, Decimal]:
        return asdict(self)
