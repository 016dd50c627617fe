"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped PostgreSQL engine for tests marked `db`.

    Uses TEST_DATABASE_URL; the tests are skipped when it is unreachable.
    Tables are created up front and dropped when the session ends.
    """
    from tests import check_db_available, TEST_DB_URL

    if not check_db_available():
        pytest.skip("Test database not available")

    from sqlalchemy import create_engine
    from database.models import Base

    engine = create_engine(TEST_DB_URL)
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Drop the cached AppConfig so env overrides in one test don't leak into the next."""
    from core.config_loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()
