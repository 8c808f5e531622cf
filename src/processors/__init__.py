from .contribution_tables import days_in_month, social_security_contribution, insurance_contribution
from .statutory_calculator import calculate_statutory, calculate_statutory_for_month
from .contribution_table_generator import ContributionTableGenerator


__all__ = [
    'days_in_month',
    'social_security_contribution',
    'insurance_contribution',
    'calculate_statutory',
    'calculate_statutory_for_month',
    'ContributionTableGenerator'
]
