#!/usr/bin/env python3
"""
Matching Module - Team/Opportunity compatibility scoring and ranking.

Public API:
- MatchingService: Search and recommendation orchestrator
- calculate_match / build_match / get_recommendation: Pure scoring functions
- Team, Opportunity: Entities consumed from the stores
- MatchScore, ScoreBreakdown, TeamOpportunityMatch: Derived results
- MatchingFilters: Caller-supplied search filters

Modules:
- models.py: Entities and result structures
- dimensions.py: The seven sub-score functions
- scorer.py: Score assembly and recommendation tiers
- explainability.py: Reasoning, strengths and concerns
- filters.py: Post-scoring filtering and ranking
- stores.py: TeamStore / OpportunityStore interfaces
- exceptions.py: Service exceptions
- service.py: MatchingService
"""

from core.matching.models import (
    Team,
    Opportunity,
    MatchScore,
    ScoreBreakdown,
    TeamOpportunityMatch,
    MatchingFilters,
    TeamSizeRange,
    CompensationRange,
)
from core.matching.scorer import calculate_match, build_match, get_recommendation
from core.matching.stores import TeamStore, OpportunityStore
from core.matching.service import MatchingService

__all__ = [
    'MatchingService',
    'calculate_match',
    'build_match',
    'get_recommendation',
    'Team',
    'Opportunity',
    'MatchScore',
    'ScoreBreakdown',
    'TeamOpportunityMatch',
    'MatchingFilters',
    'TeamSizeRange',
    'CompensationRange',
    'TeamStore',
    'OpportunityStore',
]
