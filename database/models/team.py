import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Integer, Index

from .base import Base, DocumentType, utc_now


class TeamRecord(Base):
    """
    Stored team profile.

    The full profile lives in `document` (camelCase keys, validated into
    core.matching.Team on read). Fields used for store-level filtering and
    ordering are mirrored into their own columns.
    """
    __tablename__ = 'team'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False, default='')

    # Filter columns
    availability_status = Column(Text)  # available|selective|not_available
    verification_status = Column(Text)  # verified|pending|...
    popularity = Column(Integer, nullable=False, default=0)  # featured ordering

    document = Column(DocumentType, nullable=False, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_team_availability_verification', 'availability_status', 'verification_status'),
        Index('idx_team_popularity', 'popularity'),
    )
