#!/usr/bin/env python3
"""
Match Filters - Post-scoring filtering, ranking and truncation.

Team searches honour min_score, team_size_range and compensation_range.
Opportunity searches honour min_score and industry_preference.
location_preference and compensation currency are accepted but not consulted.
"""

from typing import List, Optional

from core.matching.models import MatchingFilters, TeamOpportunityMatch
from core.matching.exceptions import InvalidFilterException


def validate_filters(filters: Optional[MatchingFilters]) -> None:
    """Reject inconsistent filters before any store access.

    Raises:
        InvalidFilterException: If a range is inverted or a bound is out of range.
    """
    if filters is None:
        return

    if filters.min_score is not None and not (0 <= filters.min_score <= 100):
        raise InvalidFilterException(f"min_score must be within [0, 100], got {filters.min_score}")

    if filters.max_results is not None and filters.max_results < 1:
        raise InvalidFilterException(f"max_results must be at least 1, got {filters.max_results}")

    size_range = filters.team_size_range
    if size_range is not None and size_range.min > size_range.max:
        raise InvalidFilterException(
            f"team_size_range min ({size_range.min}) exceeds max ({size_range.max})"
        )

    comp_range = filters.compensation_range
    if comp_range is not None and comp_range.min > comp_range.max:
        raise InvalidFilterException(
            f"compensation_range min ({comp_range.min}) exceeds max ({comp_range.max})"
        )


def _apply_min_score(
    matches: List[TeamOpportunityMatch],
    filters: MatchingFilters
) -> List[TeamOpportunityMatch]:
    # A zero threshold filters nothing, so it is treated like an unset one
    if filters.min_score:
        return [m for m in matches if m.score.total >= filters.min_score]
    return matches


def apply_team_filters(
    matches: List[TeamOpportunityMatch],
    filters: Optional[MatchingFilters]
) -> List[TeamOpportunityMatch]:
    """Filter team candidates by score, team size and compensation overlap."""
    if filters is None:
        return matches

    filtered = _apply_min_score(matches, filters)

    if filters.team_size_range:
        size_range = filters.team_size_range
        filtered = [
            m for m in filtered
            if size_range.min <= m.team.size <= size_range.max
        ]

    if filters.compensation_range:
        comp_range = filters.compensation_range
        # Teams without a declared expectation are kept
        filtered = [
            m for m in filtered
            if m.team.expected_value is None
            or (m.team.expected_value.min <= comp_range.max
                and m.team.expected_value.max >= comp_range.min)
        ]

    return filtered


def apply_opportunity_filters(
    matches: List[TeamOpportunityMatch],
    filters: Optional[MatchingFilters]
) -> List[TeamOpportunityMatch]:
    """Filter opportunity candidates by score and preferred industries."""
    if filters is None:
        return matches

    filtered = _apply_min_score(matches, filters)

    if filters.industry_preference:
        preferred = filters.industry_preference
        filtered = [
            m for m in filtered
            if any(industry in m.opportunity.industry for industry in preferred)
        ]

    return filtered


def rank_matches(
    matches: List[TeamOpportunityMatch],
    max_results: Optional[int] = None
) -> List[TeamOpportunityMatch]:
    """Sort by total score, highest first, and truncate.

    The sort is stable: equal totals keep the order the candidate pool was
    fetched in.
    """
    ranked = sorted(matches, key=lambda m: m.score.total, reverse=True)
    if max_results:
        ranked = ranked[:max_results]
    return ranked
