#!/usr/bin/env python3
"""
Compatibility Scorer - Team vs Opportunity match score.

Pure and deterministic: no I/O, no shared state, safe to call concurrently.
The total is the sum of seven independently rounded sub-scores, so it always
lies in [0, 100].
"""

import logging

from core.matching.models import (
    Team, Opportunity, MatchScore, ScoreBreakdown, TeamOpportunityMatch
)
from core.matching import dimensions
from core.matching import explainability

logger = logging.getLogger(__name__)

RECOMMENDATION_TIERS = (
    (85, 'excellent'),
    (70, 'good'),
    (55, 'fair'),
)


def calculate_match(team: Team, opportunity: Opportunity) -> MatchScore:
    """Score one team against one opportunity."""
    breakdown = ScoreBreakdown(
        skills_match=dimensions.skills_match(team, opportunity),
        industry_match=dimensions.industry_match(team, opportunity),
        experience_match=dimensions.experience_match(team, opportunity),
        location_match=dimensions.location_match(team, opportunity),
        compensation_match=dimensions.compensation_match(team, opportunity),
        culture_match=dimensions.culture_match(team, opportunity),
        availability_match=dimensions.availability_match(team, opportunity),
    )

    total = breakdown.total_points()
    reasoning = explainability.generate_reasoning(team, opportunity, breakdown)

    logger.debug(f"Team {team.id} vs opportunity {opportunity.id}: total={total}")

    return MatchScore(total=total, breakdown=breakdown, reasoning=reasoning)


def get_recommendation(total: float) -> str:
    """Classify a total score; each tier's lower bound is inclusive."""
    for threshold, label in RECOMMENDATION_TIERS:
        if total >= threshold:
            return label
    return 'poor'


def build_match(team: Team, opportunity: Opportunity) -> TeamOpportunityMatch:
    """Score a pair and attach recommendation, strengths and concerns."""
    score = calculate_match(team, opportunity)
    return TeamOpportunityMatch(
        team=team,
        opportunity=opportunity,
        score=score,
        recommendation=get_recommendation(score.total),
        key_strengths=explainability.extract_strengths(team, opportunity, score),
        potential_concerns=explainability.extract_concerns(team, opportunity, score),
    )
