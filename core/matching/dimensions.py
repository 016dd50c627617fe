#!/usr/bin/env python3
"""
Dimension Scores - The seven independent team/opportunity sub-scores.

Each function returns an integer in [0, max] for its dimension:
- Skills (25): required skills covered by team specializations
- Industry (20): exact, related, or unrelated industry
- Experience (15): tenure working together and cohesion
- Location (10): location and remote compatibility
- Compensation (15): opportunity budget against team expectations
- Culture (10): work arrangement and shared values
- Availability (5): team availability status

Missing or partial data never raises; it maps to a neutral default.
"""

from typing import Optional

from core.utils import round_half_up, lower_all, contains_either_way
from core.matching.models import (
    Team, Opportunity,
    SKILLS_MAX, INDUSTRY_MAX, EXPERIENCE_MAX, LOCATION_MAX,
    COMPENSATION_MAX, CULTURE_MAX, AVAILABILITY_MAX,
    AVAILABILITY_AVAILABLE, AVAILABILITY_SELECTIVE,
    REMOTE, HYBRID, ONSITE,
)

# Keywords that mark two different industries as related
RELATED_INDUSTRY_KEYWORDS = ('financial', 'tech', 'healthcare')

TENURE_CAP_YEARS = 3
DEFAULT_COHESION = 5


def skills_match(team: Team, opportunity: Opportunity) -> int:
    """Fraction of required skills covered by the team, scaled to 25.

    A required skill counts as covered when it is a substring of a team
    specialization or the other way round, case-insensitively. Postings with
    no required skills get half marks.
    """
    if not opportunity.skills:
        return round_half_up(SKILLS_MAX * 0.5)

    team_skills = lower_all(team.specializations)
    required_skills = lower_all(opportunity.skills)

    matched = [
        skill for skill in required_skills
        if any(contains_either_way(team_skill, skill) for team_skill in team_skills)
    ]

    match_ratio = len(matched) / len(required_skills)
    return round_half_up(match_ratio * SKILLS_MAX)


def _related_industries(team_industries, opportunity_industries) -> bool:
    for ti in team_industries:
        for oi in opportunity_industries:
            for keyword in RELATED_INDUSTRY_KEYWORDS:
                if keyword in ti and keyword in oi:
                    return True
    return False


def industry_match(team: Team, opportunity: Opportunity) -> int:
    """Full marks for a shared industry, 70% if related, otherwise 30%."""
    team_industries = lower_all(team.industry)
    opportunity_industries = lower_all(opportunity.industry)

    if any(ti in opportunity_industries for ti in team_industries):
        return INDUSTRY_MAX

    if _related_industries(team_industries, opportunity_industries):
        return round_half_up(INDUSTRY_MAX * 0.7)

    return round_half_up(INDUSTRY_MAX * 0.3)


def experience_match(team: Team, opportunity: Opportunity) -> int:
    """Tenure (60%, capped at 3 years) plus cohesion (40%)."""
    years_together = max(team.dynamics.years_working_together or 0.0, 0.0)
    # A zero cohesion score is treated as unset
    cohesion = team.dynamics.cohesion_score or DEFAULT_COHESION
    cohesion = min(max(cohesion, 0.0), 10.0)

    tenure_part = min(years_together / TENURE_CAP_YEARS * 0.6, 0.6)
    cohesion_part = (cohesion / 10) * 0.4

    return round_half_up((tenure_part + cohesion_part) * EXPERIENCE_MAX)


def location_match(team: Team, opportunity: Opportunity) -> int:
    """Location compatibility; the first matching rule wins."""
    remote_policy = opportunity.remote_policy
    # An unset location never counts as the same place
    same_location = bool(team.location.primary) and team.location.primary == opportunity.location

    if same_location or (team.location.remote and remote_policy == REMOTE):
        return LOCATION_MAX

    if remote_policy == HYBRID and team.location.remote:
        return round_half_up(LOCATION_MAX * 0.8)

    if team.location.remote or remote_policy != ONSITE:
        return round_half_up(LOCATION_MAX * 0.6)

    return round_half_up(LOCATION_MAX * 0.2)


def opportunity_budget(team: Team, opportunity: Opportunity) -> Optional[float]:
    """Total budget offered for this team, or None if the posting has none.

    Uses the declared total when set, otherwise the per-member maximum times
    the team size.
    """
    compensation = opportunity.compensation
    if compensation is None:
        return None
    if compensation.total:
        return compensation.total
    if compensation.max is None:
        return None
    return compensation.max * team.size


def compensation_match(team: Team, opportunity: Opportunity) -> int:
    """Opportunity budget compared against the team's expectation range."""
    expected = team.expected_value
    budget = opportunity_budget(team, opportunity)

    if expected is None or budget is None:
        return round_half_up(COMPENSATION_MAX * 0.5)

    if budget >= expected.max:
        return COMPENSATION_MAX
    if budget >= expected.min:
        return round_half_up(COMPENSATION_MAX * 0.8)
    if budget >= expected.min * 0.8:
        return round_half_up(COMPENSATION_MAX * 0.5)

    return round_half_up(COMPENSATION_MAX * 0.2)


def culture_match(team: Team, opportunity: Opportunity) -> int:
    """Base 50%, plus work arrangement fit and shared values, capped at 10."""
    score = CULTURE_MAX * 0.5

    arrangement = team.dynamics.preferred_work_arrangement
    if arrangement == REMOTE and opportunity.remote_policy == REMOTE:
        score += CULTURE_MAX * 0.3
    elif arrangement == HYBRID and opportunity.remote_policy == HYBRID:
        score += CULTURE_MAX * 0.2

    culture_values = opportunity.culture.values if opportunity.culture else []
    if culture_values:
        opportunity_values = lower_all(culture_values)
        value_matches = [
            tv for tv in lower_all(team.values)
            if any(contains_either_way(tv, ov) for ov in opportunity_values)
        ]
        score += (len(value_matches) / max(len(team.values), 1)) * CULTURE_MAX * 0.2

    return round_half_up(min(score, CULTURE_MAX))


def availability_match(team: Team, opportunity: Opportunity) -> int:
    status = team.availability.status
    if status == AVAILABILITY_AVAILABLE:
        return AVAILABILITY_MAX
    if status == AVAILABILITY_SELECTIVE:
        return round_half_up(AVAILABILITY_MAX * 0.7)
    return 0
