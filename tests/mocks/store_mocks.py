#!/usr/bin/env python3
"""
In-memory store implementations for testing the matching service.

They keep insertion order, which stands in for the pool-fetch order a real
store returns.
"""
from typing import List, Optional, Dict

from core.matching.models import Team, Opportunity, VERIFICATION_VERIFIED
from core.matching.stores import TeamStore, OpportunityStore


class InMemoryTeamStore(TeamStore):

    def __init__(self, teams: Optional[List[Team]] = None, featured: Optional[List[Team]] = None):
        self.teams: Dict[str, Team] = {t.id: t for t in (teams or [])}
        self.featured = list(featured or [])
        self.search_calls: List[Dict] = []

    def search(
        self,
        availability: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: Optional[int] = None
    ) -> List[Team]:
        self.search_calls.append({'availability': availability, 'verified': verified, 'limit': limit})
        results = list(self.teams.values())
        if availability is not None:
            results = [t for t in results if t.availability.status == availability]
        if verified is not None:
            results = [
                t for t in results
                if (t.verification.status == VERIFICATION_VERIFIED) == verified
            ]
        return results[:limit] if limit else results

    def get_by_id(self, team_id: str) -> Optional[Team]:
        return self.teams.get(team_id)

    def get_featured(self, limit: int) -> List[Team]:
        return self.featured[:limit]


class InMemoryOpportunityStore(OpportunityStore):

    def __init__(self, opportunities: Optional[List[Opportunity]] = None):
        self.opportunities: Dict[str, Opportunity] = {o.id: o for o in (opportunities or [])}

    def search(
        self,
        status: Optional[str] = None,
        company_id: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Opportunity]:
        results = list(self.opportunities.values())
        if status is not None:
            results = [o for o in results if o.status == status]
        if company_id is not None:
            results = [o for o in results if o.company_id == company_id]
        return results[:limit] if limit else results

    def get_by_id(self, opportunity_id: str) -> Optional[Opportunity]:
        return self.opportunities.get(opportunity_id)

    def get_by_company(self, company_id: str, limit: int) -> List[Opportunity]:
        return self.search(company_id=company_id, limit=limit)
