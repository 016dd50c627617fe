from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# JSONB on PostgreSQL, plain JSON elsewhere (e.g. SQLite in tests)
DocumentType = JSON().with_variant(JSONB(), 'postgresql')


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
