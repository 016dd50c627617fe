from database.repositories.base import BaseRepository
from database.repositories.team import TeamRepository
from database.repositories.opportunity import OpportunityRepository

__all__ = [
    'BaseRepository',
    'TeamRepository',
    'OpportunityRepository',
]
