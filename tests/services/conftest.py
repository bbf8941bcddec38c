# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from sqlalchemy import text
from starlette.testclient import TestClient

from autofeature.services.api.app import create_app
from autofeature.services.api.deps import get_db, transactional_session

APP_SCHEMA = "autofeature"


@pytest.fixture()
def api_client(db_engine):
    """
    A TestClient whose session dependencies (`get_db`, `transactional_session`)
    are overridden to yield a single SQLAlchemy Session bound to the test
    engine/transaction. All API calls in one test share the same session
    (so POST -> GET works), and everything is rolled back at the end.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    session.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))

    app = create_app()

    def _override():
        yield session

    app.dependency_overrides[transactional_session] = _override
    app.dependency_overrides[get_db] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        session.close()
        trans.rollback()
        conn.close()
