#!/usr/bin/env python3
"""
Recommendation endpoints for company and team dashboards.

These never fail on upstream errors; the service degrades to a fallback list.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.matching import MatchingService
from ..dependencies import get_matching_service
from ..models.responses import (
    TeamSummary,
    OpportunitySummary,
    RecommendedTeamsResponse,
    RecommendedOpportunitiesResponse,
)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("/teams", response_model=RecommendedTeamsResponse)
def recommended_teams(
    company_id: str = Query(alias="companyId"),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    service: MatchingService = Depends(get_matching_service)
):
    """Teams recommended for a company, or featured teams as a fallback."""
    teams = service.get_recommended_teams(company_id, limit)
    return RecommendedTeamsResponse(
        success=True,
        count=len(teams),
        teams=[TeamSummary.from_team(t) for t in teams]
    )


@router.get("/opportunities", response_model=RecommendedOpportunitiesResponse)
def recommended_opportunities(
    team_id: str = Query(alias="teamId"),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    service: MatchingService = Depends(get_matching_service)
):
    """Opportunities recommended for a team; empty when nothing can be scored."""
    opportunities = service.get_recommended_opportunities(team_id, limit)
    return RecommendedOpportunitiesResponse(
        success=True,
        count=len(opportunities),
        opportunities=[OpportunitySummary.from_opportunity(o) for o in opportunities]
    )
