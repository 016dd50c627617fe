import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Index

from .base import Base, DocumentType, utc_now


class OpportunityRecord(Base):
    """
    Stored opportunity posting.

    The full posting lives in `document`; status, owning company and creation
    time are mirrored into columns for filtering and recency ordering.
    """
    __tablename__ = 'opportunity'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(Text, nullable=False, default='')
    company_id = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default='active')  # active|closed|draft

    document = Column(DocumentType, nullable=False, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index('idx_opportunity_status', 'status'),
        Index('idx_opportunity_company_created', 'company_id', 'created_at'),
    )
