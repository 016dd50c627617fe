import logging
from datetime import datetime
from typing import List, Optional, Dict, Any

from sqlalchemy import select, or_

from core.matching.models import Team, VERIFICATION_VERIFIED
from core.matching.stores import TeamStore
from database.models import TeamRecord
from database.models.base import utc_now
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TeamRepository(BaseRepository, TeamStore):
    """SQLAlchemy-backed TeamStore."""

    @staticmethod
    def to_entity(record: TeamRecord) -> Team:
        document: Dict[str, Any] = dict(record.document or {})
        document['id'] = record.id
        document.setdefault('name', record.name)
        return Team.model_validate(document)

    def _active(self):
        return select(TeamRecord).where(TeamRecord.deleted_at.is_(None))

    def search(
        self,
        availability: Optional[str] = None,
        verified: Optional[bool] = None,
        limit: Optional[int] = None
    ) -> List[Team]:
        stmt = self._active()

        if availability is not None:
            stmt = stmt.where(TeamRecord.availability_status == availability)

        if verified is True:
            stmt = stmt.where(TeamRecord.verification_status == VERIFICATION_VERIFIED)
        elif verified is False:
            stmt = stmt.where(or_(
                TeamRecord.verification_status != VERIFICATION_VERIFIED,
                TeamRecord.verification_status.is_(None)
            ))

        # Stable pool order; ranking ties fall back to it
        stmt = stmt.order_by(TeamRecord.created_at.asc(), TeamRecord.id.asc())

        if limit:
            stmt = stmt.limit(limit)

        records = self.db.execute(stmt).scalars().all()
        logger.debug(f"Team search returned {len(records)} records")
        return [self.to_entity(r) for r in records]

    def get_by_id(self, team_id: str) -> Optional[Team]:
        stmt = self._active().where(TeamRecord.id == team_id)
        record = self.db.execute(stmt).scalar_one_or_none()
        return self.to_entity(record) if record else None

    def get_featured(self, limit: int) -> List[Team]:
        stmt = (
            self._active()
            .where(TeamRecord.verification_status == VERIFICATION_VERIFIED)
            .order_by(TeamRecord.popularity.desc(), TeamRecord.created_at.desc())
            .limit(limit)
        )
        records = self.db.execute(stmt).scalars().all()
        return [self.to_entity(r) for r in records]

    def add(
        self,
        team: Team,
        popularity: int = 0,
        created_at: Optional[datetime] = None
    ) -> TeamRecord:
        record = TeamRecord(
            id=team.id,
            name=team.name,
            created_at=created_at or utc_now(),
            availability_status=team.availability.status,
            verification_status=team.verification.status,
            popularity=popularity,
            document=team.model_dump(by_alias=True, mode='json', exclude={'id'}),
        )
        return self._persist(record)
