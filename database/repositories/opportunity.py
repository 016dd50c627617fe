import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select

from core.matching.models import Opportunity
from core.matching.stores import OpportunityStore
from database.models import OpportunityRecord
from database.models.base import utc_now
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OpportunityRepository(BaseRepository, OpportunityStore):
    """SQLAlchemy-backed OpportunityStore."""

    @staticmethod
    def to_entity(record: OpportunityRecord) -> Opportunity:
        document: Dict[str, Any] = dict(record.document or {})
        # Columns are authoritative for the fields mirrored out of the document
        document['id'] = record.id
        document['status'] = record.status
        document['companyId'] = record.company_id
        document['createdAt'] = record.created_at
        document.setdefault('title', record.title)
        return Opportunity.model_validate(document)

    def search(
        self,
        status: Optional[str] = None,
        company_id: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Opportunity]:
        stmt = select(OpportunityRecord)

        if status is not None:
            stmt = stmt.where(OpportunityRecord.status == status)

        if company_id is not None:
            stmt = stmt.where(OpportunityRecord.company_id == company_id)

        stmt = stmt.order_by(OpportunityRecord.created_at.desc(), OpportunityRecord.id.asc())

        if limit:
            stmt = stmt.limit(limit)

        records = self.db.execute(stmt).scalars().all()
        logger.debug(f"Opportunity search returned {len(records)} records")
        return [self.to_entity(r) for r in records]

    def get_by_id(self, opportunity_id: str) -> Optional[Opportunity]:
        stmt = select(OpportunityRecord).where(OpportunityRecord.id == opportunity_id)
        record = self.db.execute(stmt).scalar_one_or_none()
        return self.to_entity(record) if record else None

    def get_by_company(self, company_id: str, limit: int) -> List[Opportunity]:
        return self.search(company_id=company_id, limit=limit)

    def add(self, opportunity: Opportunity) -> OpportunityRecord:
        record = OpportunityRecord(
            id=opportunity.id,
            title=opportunity.title,
            company_id=opportunity.company_id,
            status=opportunity.status or 'active',
            created_at=opportunity.created_at or utc_now(),
            document=opportunity.model_dump(
                by_alias=True, mode='json',
                exclude={'id', 'status', 'company_id', 'created_at'}
            ),
        )
        return self._persist(record)
