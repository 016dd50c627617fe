#!/usr/bin/env python3
"""
Matching endpoints - rank teams for an opportunity and opportunities for a team.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.config_loader import MatchingConfig
from core.matching import (
    MatchingService,
    MatchingFilters,
    TeamSizeRange,
    CompensationRange,
)
from core.matching.exceptions import InvalidFilterException
from ..dependencies import get_matching_service, get_matching_config
from ..models.responses import (
    MatchResponse,
    TeamMatchesResponse,
    OpportunityMatchesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


def _bounded_range(low, high, name: str):
    """Both ends or neither; a single bound is rejected."""
    if low is None and high is None:
        return None
    if low is None or high is None:
        raise InvalidFilterException(f"{name} requires both a minimum and a maximum")
    return low, high


@router.get("/teams", response_model=TeamMatchesResponse)
def find_teams(
    opportunity_id: str = Query(alias="opportunityId", description="Anchor opportunity ID"),
    min_score: Optional[float] = Query(default=None, alias="minScore", ge=0, le=100),
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    min_team_size: Optional[int] = Query(default=None, alias="minTeamSize", ge=0),
    max_team_size: Optional[int] = Query(default=None, alias="maxTeamSize", ge=0),
    min_compensation: Optional[float] = Query(default=None, alias="minCompensation", ge=0),
    max_compensation: Optional[float] = Query(default=None, alias="maxCompensation", ge=0),
    currency: Optional[str] = Query(default=None),
    service: MatchingService = Depends(get_matching_service),
    config: MatchingConfig = Depends(get_matching_config)
):
    """
    Rank available, verified teams against an opportunity.

    minScore and limit fall back to the configured API defaults.
    """
    size_bounds = _bounded_range(min_team_size, max_team_size, "Team size filter")
    comp_bounds = _bounded_range(min_compensation, max_compensation, "Compensation filter")

    filters = MatchingFilters(
        min_score=min_score if min_score is not None else config.api_default_min_score,
        max_results=limit if limit is not None else config.api_default_limit,
        team_size_range=TeamSizeRange(min=size_bounds[0], max=size_bounds[1]) if size_bounds else None,
        compensation_range=CompensationRange(
            min=comp_bounds[0], max=comp_bounds[1], currency=currency
        ) if comp_bounds else None,
    )

    matches = service.find_teams_for_opportunity(opportunity_id, filters)

    return TeamMatchesResponse(
        success=True,
        opportunity_id=opportunity_id,
        count=len(matches),
        matches=[MatchResponse.from_match(m) for m in matches]
    )


@router.get("/opportunities", response_model=OpportunityMatchesResponse)
def find_opportunities(
    team_id: str = Query(alias="teamId", description="Anchor team ID"),
    min_score: Optional[float] = Query(default=None, alias="minScore", ge=0, le=100),
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    industry: Optional[List[str]] = Query(default=None, description="Preferred industries (repeatable)"),
    service: MatchingService = Depends(get_matching_service),
    config: MatchingConfig = Depends(get_matching_config)
):
    """
    Rank active opportunities against a team.

    minScore and limit fall back to the configured API defaults.
    """
    filters = MatchingFilters(
        min_score=min_score if min_score is not None else config.api_default_min_score,
        max_results=limit if limit is not None else config.api_default_limit,
        industry_preference=industry or None,
    )

    matches = service.find_opportunities_for_team(team_id, filters)

    return OpportunityMatchesResponse(
        success=True,
        team_id=team_id,
        count=len(matches),
        matches=[MatchResponse.from_match(m) for m in matches]
    )
