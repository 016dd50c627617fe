#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from core.matching.models import Team, Opportunity, TeamOpportunityMatch


class ApiModel(BaseModel):
    """Serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreBreakdownResponse(ApiModel):
    skills_match: int = Field(ge=0, le=25)
    industry_match: int = Field(ge=0, le=20)
    experience_match: int = Field(ge=0, le=15)
    location_match: int = Field(ge=0, le=10)
    compensation_match: int = Field(ge=0, le=15)
    culture_match: int = Field(ge=0, le=10)
    availability_match: int = Field(ge=0, le=5)


class MatchScoreResponse(ApiModel):
    total: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdownResponse
    reasoning: List[str]


class TeamSummary(ApiModel):
    """Team fields shown alongside a match."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "team-7f3a",
                "name": "Payments Platform Team",
                "size": 5,
                "industry": ["Financial Services"],
                "specializations": ["Python", "AWS"],
                "location": "New York",
                "remote": True,
                "availabilityStatus": "available",
                "verificationStatus": "verified"
            }
        }
    )

    id: str
    name: str
    size: int
    industry: List[str]
    specializations: List[str]
    location: str
    remote: bool
    availability_status: Optional[str] = None
    verification_status: Optional[str] = None

    @classmethod
    def from_team(cls, team: Team) -> "TeamSummary":
        return cls(
            id=team.id,
            name=team.name,
            size=team.size,
            industry=team.industry,
            specializations=team.specializations,
            location=team.location.primary,
            remote=team.location.remote,
            availability_status=team.availability.status,
            verification_status=team.verification.status,
        )


class OpportunitySummary(ApiModel):
    """Opportunity fields shown alongside a match."""
    id: str
    title: str
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    industry: List[str]
    skills: List[str]
    location: str
    remote_policy: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_opportunity(cls, opportunity: Opportunity) -> "OpportunitySummary":
        return cls(
            id=opportunity.id,
            title=opportunity.title,
            company_id=opportunity.company_id,
            company_name=opportunity.company_name,
            industry=opportunity.industry,
            skills=opportunity.skills,
            location=opportunity.location,
            remote_policy=opportunity.remote_policy,
            status=opportunity.status,
        )


class MatchResponse(ApiModel):
    """One scored team/opportunity pair."""
    team: TeamSummary
    opportunity: OpportunitySummary
    score: MatchScoreResponse
    recommendation: str
    key_strengths: List[str]
    potential_concerns: List[str]

    @classmethod
    def from_match(cls, match: TeamOpportunityMatch) -> "MatchResponse":
        breakdown = match.score.breakdown
        return cls(
            team=TeamSummary.from_team(match.team),
            opportunity=OpportunitySummary.from_opportunity(match.opportunity),
            score=MatchScoreResponse(
                total=match.score.total,
                breakdown=ScoreBreakdownResponse(**breakdown.as_dict()),
                reasoning=match.score.reasoning,
            ),
            recommendation=match.recommendation,
            key_strengths=match.key_strengths,
            potential_concerns=match.potential_concerns,
        )


class TeamMatchesResponse(ApiModel):
    """Ranked teams for an opportunity."""
    success: bool
    opportunity_id: str
    count: int
    matches: List[MatchResponse]


class OpportunityMatchesResponse(ApiModel):
    """Ranked opportunities for a team."""
    success: bool
    team_id: str
    count: int
    matches: List[MatchResponse]


class RecommendedTeamsResponse(ApiModel):
    success: bool
    count: int
    teams: List[TeamSummary]


class RecommendedOpportunitiesResponse(ApiModel):
    success: bool
    count: int
    opportunities: List[OpportunitySummary]


class HealthResponse(BaseModel):
    status: str
    service: str
