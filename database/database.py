import contextlib
import logging
from typing import Dict, Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import DatabaseConfig, get_config
from database.models import Base

logger = logging.getLogger(__name__)


def build_engine(config: DatabaseConfig) -> Engine:
    """Create an engine for the configured database.

    On PostgreSQL every statement is bounded by statement_timeout_ms, which
    caps how long a candidate pool fetch can take.
    """
    kwargs: Dict[str, Any] = {'pool_pre_ping': config.pool_pre_ping}

    if config.url.startswith('postgresql') and config.statement_timeout_ms:
        kwargs['connect_args'] = {
            'options': f"-c statement_timeout={config.statement_timeout_ms}"
        }

    return create_engine(config.url, **kwargs)


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def configure_database(config: DatabaseConfig) -> sessionmaker:
    """(Re)bind the module session factory to the given database."""
    global _engine, _session_factory
    _engine = build_engine(config)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _session_factory


def get_session_factory() -> sessionmaker:
    if _session_factory is None:
        return configure_database(get_config().database)
    return _session_factory


@contextlib.contextmanager
def db_session_scope():
    """Provide a transactional scope around a series of operations."""
    session: Session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet."""
    if engine is None:
        get_session_factory()
        engine = _engine
    Base.metadata.create_all(engine)
    logger.info("Database tables created")
