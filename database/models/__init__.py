from .base import Base
from .team import TeamRecord
from .opportunity import OpportunityRecord

__all__ = [
    'Base',
    'TeamRecord',
    'OpportunityRecord',
]
