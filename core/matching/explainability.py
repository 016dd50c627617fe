#!/usr/bin/env python3
"""
Explainability Module - Human-readable annotations for a match.

- Reasoning: ordered sentences derived from the score breakdown
- Key strengths / potential concerns: derived from the breakdown and from team
  fields that do not feed the score (verification, liftout history,
  performance, non-compete restrictions)

Annotations are presentation-only; none of them change the total.
"""

from typing import List

from core.matching.models import (
    Team, Opportunity, MatchScore, ScoreBreakdown,
    SKILLS_MAX, VERIFICATION_VERIFIED,
)


def _format_years(years: float) -> str:
    if float(years).is_integer():
        return str(int(years))
    return f"{years:g}"


def generate_reasoning(
    team: Team,
    opportunity: Opportunity,
    breakdown: ScoreBreakdown
) -> List[str]:
    """
    Build reasoning sentences from threshold checks on the breakdown.

    Checks run in a fixed order (skills, industry, experience, compensation,
    location) and are independent of each other.
    """
    reasoning = []

    if breakdown.skills_match >= 20:
        reasoning.append(f"Strong skills alignment with {breakdown.skills_match}/{SKILLS_MAX} match score")
    elif breakdown.skills_match >= 15:
        reasoning.append("Good skills overlap with room for growth")
    else:
        reasoning.append("Limited skills match may require additional training")

    if breakdown.industry_match >= 16:
        reasoning.append(f"Excellent industry experience in {', '.join(team.industry)}")
    elif breakdown.industry_match >= 10:
        reasoning.append("Related industry experience provides good foundation")

    if breakdown.experience_match >= 12:
        years = _format_years(team.dynamics.years_working_together)
        reasoning.append(f"Highly experienced team with {years} years working together")

    if breakdown.compensation_match <= 8:
        reasoning.append("Compensation expectations may exceed current budget")

    if breakdown.location_match <= 5:
        reasoning.append("Location mismatch may require relocation or remote work arrangement")

    return reasoning


def extract_strengths(team: Team, opportunity: Opportunity, score: MatchScore) -> List[str]:
    breakdown = score.breakdown
    strengths = []

    if breakdown.skills_match >= 20:
        strengths.append('Exceptional skills match')

    if breakdown.industry_match >= 16:
        strengths.append('Deep industry expertise')

    if breakdown.experience_match >= 12:
        strengths.append('Proven team cohesion and track record')

    if team.verification.status == VERIFICATION_VERIFIED:
        strengths.append('Fully verified team credentials')

    if team.liftout_history.previous_liftouts:
        strengths.append('Previous successful liftout experience')

    success_rate = team.performance_metrics.success_rate
    if success_rate is not None and success_rate >= 90:
        strengths.append('Outstanding historical performance')

    return strengths


def extract_concerns(team: Team, opportunity: Opportunity, score: MatchScore) -> List[str]:
    breakdown = score.breakdown
    concerns = []

    if breakdown.skills_match <= 10:
        concerns.append('Significant skills gap requiring training')

    if breakdown.compensation_match <= 8:
        concerns.append('Budget constraints may impact negotiation')

    if breakdown.location_match <= 5:
        concerns.append('Geographic constraints require attention')

    if team.verification.status != VERIFICATION_VERIFIED:
        concerns.append('Team verification still pending')

    if (team.dynamics.years_working_together or 0) < 1:
        concerns.append('Limited shared working history')

    restrictions = team.liftout_history.non_compete_restrictions
    if restrictions is not None and restrictions.has_restrictions:
        concerns.append('Non-compete restrictions may apply')

    return concerns
