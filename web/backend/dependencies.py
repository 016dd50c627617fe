#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig, get_config
from core.matching import MatchingService
from database.database import get_session_factory
from database.repositories import TeamRepository, OpportunityRepository


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def get_matching_config() -> MatchingConfig:
    return get_config().matching


def get_matching_service(
    db: Session = Depends(get_db),
    config: MatchingConfig = Depends(get_matching_config)
) -> MatchingService:
    """Build a MatchingService over the request's session."""
    return MatchingService(
        team_store=TeamRepository(db),
        opportunity_store=OpportunityRepository(db),
        config=config
    )
