from .statutory import ContributionPair, StatutoryBreakdown

__all__ = [
    'ContributionPair',
    'StatutoryBreakdown'
]
