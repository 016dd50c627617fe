import logging

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class BaseRepository:
    """Shared session handling for the SQL-backed stores.

    Repositories never commit; the caller owns the transaction
    (db_session_scope in the CLI, the request session in the API).
    """

    def __init__(self, db: Session):
        self.db = db

    def _persist(self, record):
        self.db.add(record)
        self.db.flush()
        logger.debug(f"Stored {record.__tablename__} {record.id}")
        return record
