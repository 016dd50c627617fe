#!/usr/bin/env python3
"""
Matching Service - Rank teams against opportunities and vice versa.

Entry points:
- find_teams_for_opportunity: score available, verified teams for one opportunity
- find_opportunities_for_team: score active opportunities for one team
- get_recommended_teams: company dashboard recommendations (never raises)
- get_recommended_opportunities: team dashboard recommendations (never raises)

The service holds only references to its stores and config; scoring is pure,
so one instance can be shared across requests.
"""

from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.matching.models import (
    Team, Opportunity, MatchingFilters, TeamOpportunityMatch,
    AVAILABILITY_AVAILABLE, OPPORTUNITY_ACTIVE,
)
from core.matching.stores import TeamStore, OpportunityStore
from core.matching.exceptions import (
    EntityNotFoundException,
    TeamNotFoundException,
    OpportunityNotFoundException,
    MatchingFailedException,
    InvalidFilterException,
)
from core.matching import filters as match_filters
from core.matching.scorer import build_match

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Service for team/opportunity compatibility search and recommendations.

    Direct searches propagate failures: a missing anchor raises an
    EntityNotFoundException, anything else is wrapped in
    MatchingFailedException. Recommendation methods degrade instead of raising.
    """

    def __init__(
        self,
        team_store: TeamStore,
        opportunity_store: OpportunityStore,
        config: Optional[MatchingConfig] = None
    ):
        self.team_store = team_store
        self.opportunity_store = opportunity_store
        self.config = config or MatchingConfig()

    def find_teams_for_opportunity(
        self,
        opportunity_id: str,
        filters: Optional[MatchingFilters] = None
    ) -> List[TeamOpportunityMatch]:
        """Rank available, verified teams against one opportunity.

        Args:
            opportunity_id: Anchor opportunity ID
            filters: Optional min_score, team_size_range, compensation_range, max_results

        Returns:
            Matches sorted by total score (highest first), ties in pool order

        Raises:
            OpportunityNotFoundException: If the opportunity does not exist
            InvalidFilterException: If the filters are inconsistent
            MatchingFailedException: If a store call fails
        """
        match_filters.validate_filters(filters)

        try:
            opportunity = self.opportunity_store.get_by_id(opportunity_id)
            if opportunity is None:
                raise OpportunityNotFoundException(opportunity_id)

            teams = self.team_store.search(
                availability=AVAILABILITY_AVAILABLE,
                verified=True,
                limit=self.config.candidate_pool_limit
            )

            matches = [build_match(team, opportunity) for team in teams]
            filtered = match_filters.apply_team_filters(matches, filters)
            ranked = match_filters.rank_matches(
                filtered, filters.max_results if filters else None
            )
        except (EntityNotFoundException, InvalidFilterException):
            raise
        except Exception as e:
            logger.error(f"Error finding teams for opportunity {opportunity_id}: {e}", exc_info=True)
            raise MatchingFailedException("Failed to find matching teams") from e

        logger.info(f"Opportunity {opportunity_id}: scored {len(teams)} teams, "
                    f"returning {len(ranked)}")
        return ranked

    def find_opportunities_for_team(
        self,
        team_id: str,
        filters: Optional[MatchingFilters] = None
    ) -> List[TeamOpportunityMatch]:
        """Rank active opportunities against one team.

        Args:
            team_id: Anchor team ID
            filters: Optional min_score, industry_preference, max_results

        Returns:
            Matches sorted by total score (highest first), ties in pool order

        Raises:
            TeamNotFoundException: If the team does not exist
            InvalidFilterException: If the filters are inconsistent
            MatchingFailedException: If a store call fails
        """
        match_filters.validate_filters(filters)

        try:
            team = self.team_store.get_by_id(team_id)
            if team is None:
                raise TeamNotFoundException(team_id)

            opportunities = self.opportunity_store.search(
                status=OPPORTUNITY_ACTIVE,
                limit=self.config.candidate_pool_limit
            )

            matches = [build_match(team, opportunity) for opportunity in opportunities]
            filtered = match_filters.apply_opportunity_filters(matches, filters)
            ranked = match_filters.rank_matches(
                filtered, filters.max_results if filters else None
            )
        except (EntityNotFoundException, InvalidFilterException):
            raise
        except Exception as e:
            logger.error(f"Error finding opportunities for team {team_id}: {e}", exc_info=True)
            raise MatchingFailedException("Failed to find matching opportunities") from e

        logger.info(f"Team {team_id}: scored {len(opportunities)} opportunities, "
                    f"returning {len(ranked)}")
        return ranked

    def get_recommended_teams(
        self,
        company_user_id: str,
        limit: Optional[int] = None
    ) -> List[Team]:
        """Recommend teams for a company dashboard.

        Uses the company's most recent opportunity as the anchor. Without one,
        or if anything fails, returns the featured teams listing instead.
        """
        limit = limit or self.config.default_recommendation_limit

        try:
            company_opportunities = self.opportunity_store.get_by_company(
                company_user_id, self.config.company_opportunity_lookback
            )

            if not company_opportunities:
                logger.info(f"Company {company_user_id} has no opportunities, using featured teams")
                return self.team_store.get_featured(limit)

            latest_opportunity = company_opportunities[0]
            matches = self.find_teams_for_opportunity(
                latest_opportunity.id,
                MatchingFilters(
                    max_results=limit,
                    min_score=self.config.recommendation_min_score
                )
            )
            return [match.team for match in matches]
        except Exception as e:
            logger.warning(f"Error getting recommended teams for {company_user_id}, "
                           f"falling back to featured teams: {e}", exc_info=True)
            return self._featured_teams(limit)

    def _featured_teams(self, limit: int) -> List[Team]:
        try:
            return self.team_store.get_featured(limit)
        except Exception as e:
            logger.error(f"Featured teams fallback failed: {e}", exc_info=True)
            return []

    def get_recommended_opportunities(
        self,
        team_id: str,
        limit: Optional[int] = None
    ) -> List[Opportunity]:
        """Recommend opportunities for a team dashboard; empty list on failure."""
        limit = limit or self.config.default_recommendation_limit

        try:
            matches = self.find_opportunities_for_team(
                team_id,
                MatchingFilters(
                    max_results=limit,
                    min_score=self.config.recommendation_min_score
                )
            )
            return [match.opportunity for match in matches]
        except Exception as e:
            logger.warning(f"Error getting recommended opportunities for team {team_id}: {e}",
                           exc_info=True)
            return []
