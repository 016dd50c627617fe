"""
Entity Store Interfaces - Read access the matching service depends on.

The matching service never touches storage directly; it consumes these
interfaces. database/repositories provides the SQLAlchemy implementations.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matching.models import Team, Opportunity


class TeamStore(ABC):
    """
    Abstract read interface for team records.
    """

    @abstractmethod
    def search(
        self,
        availability: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: Optional[int] = None
    ) -> List[Team]:
        """
        Return teams matching the given filters in a stable order.
        """
        pass

    @abstractmethod
    def get_by_id(self, team_id: str) -> Optional[Team]:
        pass

    @abstractmethod
    def get_featured(self, limit: int) -> List[Team]:
        """
        Return a generic listing of featured teams, most popular first.
        """
        pass


class OpportunityStore(ABC):
    """
    Abstract read interface for opportunity records.
    """

    @abstractmethod
    def search(
        self,
        status: Optional[str] = None,
        company_id: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Opportunity]:
        """
        Return opportunities matching the given filters, most recent first.
        """
        pass

    @abstractmethod
    def get_by_id(self, opportunity_id: str) -> Optional[Opportunity]:
        pass

    @abstractmethod
    def get_by_company(self, company_id: str, limit: int) -> List[Opportunity]:
        """
        Return a company's opportunities, most recent first.
        """
        pass
